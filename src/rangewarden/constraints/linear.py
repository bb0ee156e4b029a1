"""Affine relations between two variables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from rangewarden.compare import Comparator, Ordering, three_way
from rangewarden.exceptions import PreconditionError
from rangewarden.violations import LinearIncomparable, NotIn

if TYPE_CHECKING:
  from numpy.typing import ArrayLike

  from rangewarden.protocols import Scalable
  from rangewarden.violations import DoubleViolation

# Vectorized form of each comparator
_VECTOR_OPS = {
  Comparator.LT: np.less,
  Comparator.LE: np.less_equal,
  Comparator.GT: np.greater,
  Comparator.GE: np.greater_equal,
  Comparator.EQ: np.equal,
}


@dataclass(frozen=True)
class Linear[M, O]:
  """Relation `(left * multiplier + offset) <comparator> right` between two variables.

  `multiplier` and `offset` are optional; a missing one leaves the left value
  unscaled or unshifted. The multiplication is applied before the offset.

  The ids form an ordered pair: `left_id` must be strictly below `right_id` so
  that a pair of variables always maps to a single key.

  Example:
    ```python
    # x0 * 2 + 1 <= x4
    rel = Linear(0, 4, Comparator.LE, multiplier=2, offset=1)
    rel.evaluate(3, 7)  # None (7 <= 7)
    rel.evaluate(3, 6)  # NotIn(...)
    ```

  `comparator` may also be given by symbol (e.g. "<=") and is stored as a
  Comparator.

  Raises:
    PreconditionError: If `left_id >= right_id`.
    ValueError: If `comparator` is an unknown symbol.
    TypeError: If `comparator` is neither a Comparator nor a string.
  """

  left_id: int
  right_id: int
  comparator: Comparator
  multiplier: M | None = None
  offset: O | None = None

  def __post_init__(self) -> None:
    if isinstance(self.comparator, str):
      object.__setattr__(self, "comparator", Comparator.from_symbol(self.comparator))
    elif not isinstance(self.comparator, Comparator):
      raise TypeError(
        f"comparator must be a Comparator or its symbol, got {self.comparator!r}"
      )
    if self.left_id >= self.right_id:
      raise PreconditionError(
        f"Linear relation ids must be ordered (left_id < right_id), got "
        + f"{self.left_id} and {self.right_id}"
      )

  def adjust(self, left: Scalable) -> Any:
    """Apply the multiplier, then the offset, to a left value."""
    if self.multiplier is not None:
      left = left * self.multiplier
    if self.offset is not None:
      left = left + self.offset
    return left

  def evaluate(self, left: Any, right: Any) -> DoubleViolation | None:
    """Check a pair of values against the relation.

    Returns:
      None if the relation holds, NotIn if it does not, or LinearIncomparable
      if the adjusted left value has no ordering against `right`. Violations
      carry the original, unadjusted values.
    """
    ordering: Ordering | None
    try:
      adjusted = self.adjust(left)
    except (TypeError, ArithmeticError):
      ordering = None
    else:
      ordering = three_way(adjusted, right)

    if ordering is None:
      return LinearIncomparable(self, left, right)
    if self.comparator.is_satisfied(ordering):
      return None
    return NotIn(self, left, right)

  def validate_vectorized(self, left: ArrayLike, right: ArrayLike) -> np.ndarray:
    """Return a boolean validity mask for paired arrays of values.

    Integer arrays are scaled as Python ints so large values cannot wrap
    around and disagree with `evaluate`.
    """
    left_values = np.asarray(left)
    if left_values.dtype.kind in "iu":
      left_values = left_values.astype(object)
    adjusted = self.adjust(left_values)
    mask = _VECTOR_OPS[self.comparator](adjusted, np.asarray(right))
    return np.asarray(mask, dtype=bool)

  def describe(self) -> str:
    """Describe the relation, e.g. 'x0 * 2 + 1 <= x4'."""
    lhs = f"x{self.left_id}"
    if self.multiplier is not None:
      lhs += f" * {self.multiplier!r}"
    if self.offset is not None:
      lhs += f" + {self.offset!r}"
    return f"{lhs} {self.comparator.symbol} x{self.right_id}"
