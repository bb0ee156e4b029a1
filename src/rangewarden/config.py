"""Global configuration for the rangewarden library."""

from __future__ import annotations

import contextlib
import dataclasses
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from collections.abc import Iterator


@dataclasses.dataclass
class Config:
  """Process-wide defaults for constraint checking.

  Every setting here is a default: Model and validate_* arguments that name the
  same behaviour take precedence.

  Attributes:
    warn_only: Make Model.validate_single and Model.validate_double log the
      collected violations with loguru and return False instead of raising
      ConstraintViolationError (default: False).
    report_all_boundary_violations: When a value is both below the bottom and
      above the top of one Boundary (only reachable for inverted limits),
      report TooLow and TooHigh instead of stopping at TooLow (default: False).
      Boundary.contains always stops at the first failure.
    value_type: Value type a Model resolves implicit limits with when it is
      created without one (default: int, i.e. the int64 range).
  """

  warn_only: bool = False
  report_all_boundary_violations: bool = False
  value_type: type[Any] = int


# Singleton instance
_config = Config()


def get_config() -> Config:
  """Get the global configuration."""
  return _config


def reset_config() -> None:
  """Reset configuration to defaults (mostly for testing)."""
  global _config
  _config = Config()


@contextlib.contextmanager
def overrides(**kwargs: Any) -> Iterator[None]:
  """Context manager to temporarily override configuration.

  Example:
    ```python
    # Log violations instead of raising while replaying a recorded session
    with overrides(warn_only=True):
      replay(model, samples)
    ```
  """
  unknown = [key for key in kwargs if not hasattr(_config, key)]
  if unknown:
    raise AttributeError(f"Config has no attribute '{unknown[0]}'")

  original = {key: getattr(_config, key) for key in kwargs}
  for key, value in kwargs.items():
    setattr(_config, key, value)

  try:
    yield
  finally:
    for key, value in original.items():
      setattr(_config, key, value)
