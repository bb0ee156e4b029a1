"""Implicit value bounds for the types a Boundary can hold."""

from __future__ import annotations

from typing import Any

import numpy as np

from rangewarden.protocols import Bounded

# Python ints are unbounded; the engine treats them as 64-bit
_INT_BOUNDS = (int(np.iinfo(np.int64).min), int(np.iinfo(np.int64).max))


def value_bounds(value_type: type[Any]) -> tuple[Any, Any]:
  """Return the (minimum, maximum) representable values of `value_type`.

  Resolution order:
    1. Types implementing the Bounded protocol.
    2. bool -> (False, True).
    3. numpy integer types via numpy.iinfo.
    4. Python int -> the int64 range.
    5. Floating types (Python or numpy) -> (-inf, +inf).

  Raises:
    TypeError: If the type has no known bounds.
  """
  if isinstance(value_type, type) and issubclass(value_type, Bounded):
    return value_type.min_value(), value_type.max_value()

  if value_type is bool or value_type is np.bool_:
    return False, True

  if isinstance(value_type, type) and issubclass(value_type, np.integer):
    info = np.iinfo(value_type)
    return value_type(info.min), value_type(info.max)

  if value_type is int:
    return _INT_BOUNDS

  if isinstance(value_type, type) and issubclass(value_type, (float, np.floating)):
    return value_type(-np.inf), value_type(np.inf)

  raise TypeError(
    f"Cannot determine bounds for {getattr(value_type, '__name__', value_type)!r}; "
    + "implement min_value()/max_value() classmethods (see rangewarden.protocols.Bounded)"
  )
