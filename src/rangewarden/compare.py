"""Relational comparators and three-way ordering."""

from __future__ import annotations

from enum import Enum, IntEnum


class Ordering(IntEnum):
  """Result of a three-way comparison of two values."""

  LESS = -1
  EQUAL = 0
  GREATER = 1


def three_way(left: object, right: object) -> Ordering | None:
  """Compare two values and return their ordering.

  Returns None when the pair has no ordering, either because the operands
  refuse the comparison (TypeError, or an ArithmeticError such as the
  InvalidOperation raised for a Decimal NaN) or because none of <, > and ==
  holds (e.g. float NaN).
  """
  try:
    if left < right:  # type: ignore[operator]
      return Ordering.LESS
    if left > right:  # type: ignore[operator]
      return Ordering.GREATER
    if left == right:
      return Ordering.EQUAL
  except (TypeError, ArithmeticError):
    return None
  return None


# Orderings accepted by each comparator
_ACCEPTS: dict[str, frozenset[Ordering]] = {
  "<": frozenset({Ordering.LESS}),
  "<=": frozenset({Ordering.LESS, Ordering.EQUAL}),
  ">": frozenset({Ordering.GREATER}),
  ">=": frozenset({Ordering.GREATER, Ordering.EQUAL}),
  "=": frozenset({Ordering.EQUAL}),
}


class Comparator(Enum):
  """A relational operator that classifies an Ordering as satisfied or not.

  Example:
    ```python
    Comparator.LE.is_satisfied(three_way(3, 7))  # True
    Comparator.from_symbol(">").is_satisfied(Ordering.EQUAL)  # False
    ```
  """

  LT = "<"
  LE = "<="
  GT = ">"
  GE = ">="
  EQ = "="

  @property
  def symbol(self) -> str:
    return self.value

  def is_satisfied(self, ordering: Ordering) -> bool:
    """Return True if `ordering` satisfies this relation."""
    return ordering in _ACCEPTS[self.value]

  def negate(self) -> Comparator | None:
    """Return the logical negation of this comparator, if it has one.

    EQ has no single-comparator negation and returns None.
    """
    return _NEGATIONS.get(self)

  @classmethod
  def from_symbol(cls, symbol: str) -> Comparator:
    """Look up a comparator by its symbol. Accepts '==' as an alias of '='."""
    if symbol == "==":
      symbol = "="
    try:
      return cls(symbol)
    except ValueError as e:
      raise ValueError(f"Unknown comparator symbol: {symbol!r}") from e


_NEGATIONS = {
  Comparator.LT: Comparator.GE,
  Comparator.LE: Comparator.GT,
  Comparator.GT: Comparator.LE,
  Comparator.GE: Comparator.LT,
}
