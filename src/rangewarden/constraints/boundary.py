"""Range constraints on a single variable."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from rangewarden.bounds import value_bounds
from rangewarden.compare import Comparator, Ordering, three_way
from rangewarden.config import get_config
from rangewarden.exceptions import (
  FixedPointError,
  IncomparableLimitsError,
  InvalidLimitsError,
)
from rangewarden.violations import BoundaryIncomparable, TooHigh, TooLow

if TYPE_CHECKING:
  from numpy.typing import ArrayLike

  from rangewarden.violations import BoundaryViolation


@dataclass(frozen=True)
class Limit[T]:
  """A single bound: a point and whether the point itself is admissible."""

  point: T
  inclusive: bool = True

  def __repr__(self) -> str:
    if self.inclusive:
      return f"Limit({self.point!r})"
    return f"Limit({self.point!r}, inclusive=False)"


def check_limits(top: Limit[Any], bottom: Limit[Any]) -> None:
  """Ensure `bottom` orders strictly below `top`.

  Raises:
    FixedPointError: Equal points with at least one side inclusive.
    InvalidLimitsError: Bottom above top, or equal exclusive points (empty range).
    IncomparableLimitsError: The points have no ordering.
  """
  ordering = three_way(bottom.point, top.point)
  if ordering is None:
    raise IncomparableLimitsError(top, bottom)
  if ordering is Ordering.EQUAL:
    if bottom.inclusive or top.inclusive:
      raise FixedPointError(top, bottom)
    raise InvalidLimitsError(top, bottom)
  if ordering is Ordering.GREATER:
    raise InvalidLimitsError(top, bottom)


class Boundary[T]:
  """Range constraint: an optional bottom and an optional top limit on one variable.

  A missing side is open-ended. When both sides are present the bottom point
  must order strictly below the top point; this is checked on construction
  and on every mutation, and a rejected mutation leaves the boundary as it was.

  Example:
    ```python
    # 0 <= x3 < 20
    b = Boundary(3, top=Limit(20, inclusive=False), bottom=Limit(0))
    b.contains(19)  # None (satisfied)
    b.contains(20)  # TooHigh(...)
    ```

  Raises:
    BoundaryError: If both limits are given and do not form a valid range.
  """

  def __init__(
    self,
    id: int,
    top: Limit[T] | None = None,
    bottom: Limit[T] | None = None,
  ) -> None:
    if top is not None and bottom is not None:
      check_limits(top, bottom)
    self._id = id
    self._top = top
    self._bottom = bottom

  @property
  def id(self) -> int:
    return self._id

  @property
  def top(self) -> Limit[T] | None:
    return self._top

  @property
  def bottom(self) -> Limit[T] | None:
    return self._bottom

  def __repr__(self) -> str:
    return f"Boundary({self._id!r}, top={self._top!r}, bottom={self._bottom!r})"

  def set_top(self, top: Limit[T]) -> None:
    """Replace the top limit after checking it against the current bottom."""
    if self._bottom is not None:
      check_limits(top, self._bottom)
    self._top = top

  def set_bottom(self, bottom: Limit[T]) -> None:
    """Replace the bottom limit after checking it against the current top."""
    if self._top is not None:
      check_limits(self._top, bottom)
    self._bottom = bottom

  def update(self, top: Limit[T], bottom: Limit[T]) -> None:
    """Replace both limits at once, checking the new pair together."""
    check_limits(top, bottom)
    self._top = top
    self._bottom = bottom

  def effective_top(self, value_type: type[Any]) -> Limit[Any]:
    """Return the top limit, defaulting to the type's maximum (inclusive)."""
    if self._top is not None:
      return self._top
    return Limit(value_bounds(value_type)[1])

  def effective_bottom(self, value_type: type[Any]) -> Limit[Any]:
    """Return the bottom limit, defaulting to the type's minimum (inclusive)."""
    if self._bottom is not None:
      return self._bottom
    return Limit(value_bounds(value_type)[0])

  def _check_bottom(self, value: T) -> BoundaryViolation | None:
    bottom = self._bottom
    if bottom is None:
      return None
    ordering = three_way(value, bottom.point)
    if ordering is None:
      return BoundaryIncomparable(self, value, bottom)
    cmp = Comparator.GE if bottom.inclusive else Comparator.GT
    if not cmp.is_satisfied(ordering):
      return TooLow(self, value, bottom)
    return None

  def _check_top(self, value: T) -> BoundaryViolation | None:
    top = self._top
    if top is None:
      return None
    ordering = three_way(value, top.point)
    if ordering is None:
      return BoundaryIncomparable(self, value, top)
    cmp = Comparator.LE if top.inclusive else Comparator.LT
    if not cmp.is_satisfied(ordering):
      return TooHigh(self, value, top)
    return None

  def contains(self, value: T) -> BoundaryViolation | None:
    """Check `value` against the bottom limit, then the top limit.

    Returns:
      None if the value is inside the range, otherwise the first violation found.
    """
    return self._check_bottom(value) or self._check_top(value)

  def violations(self, value: T) -> list[BoundaryViolation]:
    """Return the violations of `value` under the configured reporting policy.

    Only the first failure is reported unless
    `report_all_boundary_violations` is enabled in the global config.
    """
    report_all = get_config().report_all_boundary_violations
    found: list[BoundaryViolation] = []
    for check in (self._check_bottom, self._check_top):
      violation = check(value)
      if violation is not None:
        found.append(violation)
        if not report_all:
          break
    return found

  def validate_vectorized(self, values: ArrayLike) -> np.ndarray:
    """Return a boolean validity mask for an array of values.

    Values that cannot be ordered against a limit (e.g. NaN) are invalid.
    """
    vals = np.asarray(values)
    mask = np.ones(vals.shape, dtype=bool)
    if self._bottom is not None:
      point = self._bottom.point
      mask &= (vals >= point) if self._bottom.inclusive else (vals > point)
    if self._top is not None:
      point = self._top.point
      mask &= (vals <= point) if self._top.inclusive else (vals < point)
    return mask

  def describe(self) -> str:
    """Describe the range, e.g. '0 <= x3 < 20'."""
    name = f"x{self._id}"
    parts = []
    if self._bottom is not None:
      parts.append(f"{self._bottom.point!r} {'<=' if self._bottom.inclusive else '<'}")
    parts.append(name)
    if self._top is not None:
      parts.append(f"{'<=' if self._top.inclusive else '<'} {self._top.point!r}")
    if len(parts) == 1:
      return f"{name} unbounded"
    return " ".join(parts)
