"""Violation records produced by failed constraint checks.

Violations are values, not exceptions: checks return them and the Model
aggregates them into lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from rangewarden.constraints.boundary import Boundary, Limit
  from rangewarden.constraints.fixed import Fixed
  from rangewarden.constraints.linear import Linear


@dataclass(frozen=True)
class TooLow:
  """Value is below the boundary's bottom limit."""

  boundary: Boundary[Any]
  value: Any
  bottom: Limit[Any]

  def describe(self) -> str:
    op = "<" if self.bottom.inclusive else "<="
    return f"x{self.boundary.id} = {self.value!r} {op} bottom {self.bottom.point!r}"


@dataclass(frozen=True)
class TooHigh:
  """Value is above the boundary's top limit."""

  boundary: Boundary[Any]
  value: Any
  top: Limit[Any]

  def describe(self) -> str:
    op = ">" if self.top.inclusive else ">="
    return f"x{self.boundary.id} = {self.value!r} {op} top {self.top.point!r}"


@dataclass(frozen=True)
class BoundaryIncomparable:
  """Value cannot be ordered against one of the boundary's limits."""

  boundary: Boundary[Any]
  value: Any
  limit: Limit[Any]

  def describe(self) -> str:
    return f"x{self.boundary.id} = {self.value!r} cannot be compared with {self.limit.point!r}"


@dataclass(frozen=True)
class NotEqual:
  """Value differs from the fixed value."""

  fixed: Fixed[Any]
  expected: Any
  actual: Any

  def describe(self) -> str:
    return f"x{self.fixed.id} = {self.actual!r}, expected {self.expected!r}"


@dataclass(frozen=True)
class NotIn:
  """The pair of values does not satisfy the linear relation."""

  formula: Linear[Any, Any]
  left: Any
  right: Any

  def describe(self) -> str:
    return (
      f"{self.formula.describe()} violated for "
      + f"x{self.formula.left_id} = {self.left!r}, x{self.formula.right_id} = {self.right!r}"
    )


@dataclass(frozen=True)
class LinearIncomparable:
  """The adjusted left value cannot be ordered against the right value."""

  formula: Linear[Any, Any]
  left: Any
  right: Any

  def describe(self) -> str:
    return (
      f"Cannot evaluate {self.formula.describe()} for "
      + f"x{self.formula.left_id} = {self.left!r}, x{self.formula.right_id} = {self.right!r}"
    )


type BoundaryViolation = TooLow | TooHigh | BoundaryIncomparable
type SingleViolation = BoundaryViolation | NotEqual
type DoubleViolation = NotIn | LinearIncomparable
type Violation = SingleViolation | DoubleViolation
