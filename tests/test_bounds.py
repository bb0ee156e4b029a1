import math

import numpy as np
import pytest

from rangewarden import Boundary, Comparator, Fixed, Limit, Linear
from rangewarden.bounds import value_bounds
from rangewarden.protocols import Bounded, Scalable, ScalarConstraint


class Percent(float):
  """A float restricted to [0, 100]."""

  @classmethod
  def min_value(cls):
    return cls(0)

  @classmethod
  def max_value(cls):
    return cls(100)


class TestValueBounds:
  """Tests for implicit value bounds."""

  def test_int_is_int64(self):
    assert value_bounds(int) == (-(2**63), 2**63 - 1)

  def test_numpy_integers(self):
    assert value_bounds(np.int8) == (-128, 127)
    assert value_bounds(np.uint16) == (0, 65535)

  def test_floats_are_infinite(self):
    low, high = value_bounds(float)
    assert math.isinf(low) and low < 0
    assert math.isinf(high) and high > 0
    low32, high32 = value_bounds(np.float32)
    assert isinstance(low32, np.float32)
    assert np.isinf(high32)

  def test_bool(self):
    assert value_bounds(bool) == (False, True)

  def test_bounded_protocol(self):
    assert isinstance(Percent(5), Bounded)
    assert value_bounds(Percent) == (0, 100)

  def test_unknown_type_raises(self):
    with pytest.raises(TypeError, match="Cannot determine bounds"):
      value_bounds(str)


class TestProtocols:
  """Tests for runtime protocol checks."""

  def test_constraints_are_scalar_constraints(self):
    for constraint in (
      Boundary(0, top=Limit(1)),
      Fixed(0, 1),
      Linear(0, 1, Comparator.LT),
    ):
      assert isinstance(constraint, ScalarConstraint)

  def test_numbers_are_scalable(self):
    assert isinstance(3, Scalable)
    assert isinstance(np.float64(1.5), Scalable)
    assert not isinstance(None, Scalable)
