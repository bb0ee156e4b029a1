"""Equality constraints on a single variable."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from rangewarden.violations import NotEqual

if TYPE_CHECKING:
  from numpy.typing import ArrayLike


@dataclass(frozen=True)
class Fixed[V]:
  """Pins variable `id` to exactly `value`."""

  id: int
  value: V

  def satisfies(self, value: V) -> NotEqual | None:
    """Return None if `value` equals the fixed value, otherwise a NotEqual."""
    if self.value == value:
      return None
    return NotEqual(self, self.value, value)

  def validate_vectorized(self, values: ArrayLike) -> np.ndarray:
    """Return a boolean validity mask for an array of values."""
    return np.asarray(values) == self.value

  def describe(self) -> str:
    return f"x{self.id} == {self.value!r}"
