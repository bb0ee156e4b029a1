"""Protocols for rangewarden value types and constraints."""

from __future__ import annotations

from typing import Any, Protocol, Self, runtime_checkable


@runtime_checkable
class Bounded(Protocol):
  """Protocol for value types that supply their own representable range.

  Used as the implicit limits of a Boundary side that was not declared.
  """

  @classmethod
  def min_value(cls) -> Self:
    """Return the smallest representable value."""
    ...

  @classmethod
  def max_value(cls) -> Self:
    """Return the largest representable value."""
    ...


@runtime_checkable
class Scalable(Protocol):
  """Protocol for values a Linear relation can scale and shift."""

  def __mul__(self, other: Any) -> Any: ...

  def __add__(self, other: Any) -> Any: ...


@runtime_checkable
class ScalarConstraint(Protocol):
  """Protocol for objects that constrain scalar values."""

  def describe(self) -> str:
    """Return a string description of the constraint (e.g. '0 <= x1 < 20')."""
    ...
