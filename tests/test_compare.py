from hypothesis import given, strategies as st
from decimal import Decimal

import pytest

from rangewarden import Comparator, Ordering, three_way


class TestComparator:
  """Tests for the comparator truth table."""

  @pytest.mark.parametrize(
    ("comparator", "accepted"),
    [
      (Comparator.LT, {Ordering.LESS}),
      (Comparator.LE, {Ordering.LESS, Ordering.EQUAL}),
      (Comparator.GT, {Ordering.GREATER}),
      (Comparator.GE, {Ordering.GREATER, Ordering.EQUAL}),
      (Comparator.EQ, {Ordering.EQUAL}),
    ],
  )
  def test_truth_table(self, comparator, accepted):
    for ordering in Ordering:
      assert comparator.is_satisfied(ordering) is (ordering in accepted)

  def test_from_symbol(self):
    assert Comparator.from_symbol("<=") is Comparator.LE
    assert Comparator.from_symbol("=") is Comparator.EQ
    assert Comparator.from_symbol("==") is Comparator.EQ
    with pytest.raises(ValueError, match="Unknown comparator"):
      Comparator.from_symbol("!=")

  def test_symbol(self):
    assert [c.symbol for c in Comparator] == ["<", "<=", ">", ">=", "="]

  def test_negate(self):
    assert Comparator.LT.negate() is Comparator.GE
    assert Comparator.GE.negate() is Comparator.LT
    assert Comparator.LE.negate() is Comparator.GT
    assert Comparator.GT.negate() is Comparator.LE
    assert Comparator.EQ.negate() is None


class TestThreeWay:
  """Tests for three-way comparison."""

  def test_orderings(self):
    assert three_way(1, 2) is Ordering.LESS
    assert three_way(2, 2) is Ordering.EQUAL
    assert three_way(3, 2) is Ordering.GREATER
    assert three_way(2.5, 2) is Ordering.GREATER

  def test_nan_is_incomparable(self):
    assert three_way(float("nan"), 1.0) is None
    assert three_way(1.0, float("nan")) is None

  def test_decimal_nan_is_incomparable(self):
    assert three_way(Decimal("NaN"), Decimal(1)) is None
    assert three_way(Decimal(1), Decimal("NaN")) is None
    assert three_way(Decimal("1.5"), Decimal(1)) is Ordering.GREATER

  def test_type_error_is_incomparable(self):
    assert three_way(1, "a") is None
    assert three_way(None, 1) is None


@given(a=st.integers(), b=st.integers(), cmp=st.sampled_from(list(Comparator)))
def test_comparator_matches_python_operators(a, b, cmp):
  """Property: is_satisfied(three_way(a, b)) agrees with the Python operator."""
  expected = {
    Comparator.LT: a < b,
    Comparator.LE: a <= b,
    Comparator.GT: a > b,
    Comparator.GE: a >= b,
    Comparator.EQ: a == b,
  }[cmp]
  ordering = three_way(a, b)
  assert ordering is not None
  assert cmp.is_satisfied(ordering) is expected


@given(a=st.integers(), b=st.integers(), cmp=st.sampled_from(list(Comparator)))
def test_negation_is_complement(a, b, cmp):
  """Property: a comparator and its negation never agree."""
  negated = cmp.negate()
  if negated is None:
    return
  ordering = three_way(a, b)
  assert cmp.is_satisfied(ordering) is not negated.is_satisfied(ordering)
