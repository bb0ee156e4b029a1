"""Custom exceptions for rangewarden."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from collections.abc import Sequence

  from rangewarden.constraints.boundary import Limit
  from rangewarden.violations import Violation


class BoundaryError(ValueError):
  """Raised when a Boundary would be given an unusable pair of limits."""

  def __init__(self, msg: str, top: Limit[Any], bottom: Limit[Any]) -> None:
    super().__init__(msg)
    self.top = top
    self.bottom = bottom


class FixedPointError(BoundaryError):
  """Raised when top and bottom collapse to a single admissible point.

  Declare a Fixed constraint instead.
  """

  def __init__(self, top: Limit[Any], bottom: Limit[Any]) -> None:
    super().__init__(
      f"Limits collapse to the single point {bottom.point!r}; use a fixed constraint",
      top,
      bottom,
    )
    self.point = bottom.point


class InvalidLimitsError(BoundaryError):
  """Raised when the bottom limit does not order strictly below the top."""

  def __init__(self, top: Limit[Any], bottom: Limit[Any]) -> None:
    super().__init__(
      f"Bottom limit {bottom.point!r} must be below top limit {top.point!r}",
      top,
      bottom,
    )


class IncomparableLimitsError(BoundaryError):
  """Raised when the top and bottom points have no ordering."""

  def __init__(self, top: Limit[Any], bottom: Limit[Any]) -> None:
    super().__init__(
      f"Cannot compare bottom limit {bottom.point!r} with top limit {top.point!r}",
      top,
      bottom,
    )


class PreconditionError(AssertionError):
  """Raised when an API is misused in a way that indicates a programming error.

  Raised explicitly rather than via `assert` so it is not stripped by -O.
  """


class ConstraintViolationError(ValueError):
  """Raised by validate_* entry points when constraints are violated."""

  def __init__(self, violations: Sequence[Violation]) -> None:
    self.violations = tuple(violations)
    details = "; ".join(v.describe() for v in self.violations)
    super().__init__(f"{len(self.violations)} constraint violations: {details}")
