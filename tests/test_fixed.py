import numpy as np

from rangewarden import Fixed, NotEqual


class TestFixed:
  """Tests for the Fixed equality constraint."""

  def test_satisfies(self):
    f = Fixed(0, 10)
    assert f.satisfies(10) is None
    assert f.satisfies(10.0) is None

  def test_not_equal(self):
    f = Fixed(0, 10)
    violation = f.satisfies(11)
    assert violation == NotEqual(f, 10, 11)
    assert violation.expected == 10
    assert violation.actual == 11
    assert violation.describe() == "x0 = 11, expected 10"

  def test_nan_never_equal(self):
    assert isinstance(Fixed(2, 1.5).satisfies(float("nan")), NotEqual)

  def test_immutable_value_semantics(self):
    assert Fixed(1, 3) == Fixed(1, 3)
    assert hash(Fixed(1, 3)) == hash(Fixed(1, 3))

  def test_describe(self):
    assert Fixed(7, 2.5).describe() == "x7 == 2.5"

  def test_validate_vectorized(self):
    mask = Fixed(0, 3).validate_vectorized([3, 4, 3])
    np.testing.assert_array_equal(mask, [True, False, True])
