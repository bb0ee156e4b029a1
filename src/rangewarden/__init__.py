"""Rangewarden - check numeric values against declared variable constraints."""

__version__ = "0.1.0"

# Comparison
from rangewarden.compare import Comparator, Ordering, three_way

# Constraints
from rangewarden.constraints import Boundary, Fixed, Limit, Linear

# Exceptions
from rangewarden.exceptions import (
  BoundaryError,
  ConstraintViolationError,
  FixedPointError,
  IncomparableLimitsError,
  InvalidLimitsError,
  PreconditionError,
)

# Model
from rangewarden.model import Model

# Violations
from rangewarden.violations import (
  BoundaryIncomparable,
  LinearIncomparable,
  NotEqual,
  NotIn,
  TooHigh,
  TooLow,
)

__all__ = [
  "Boundary",
  "BoundaryError",
  "BoundaryIncomparable",
  "Comparator",
  "ConstraintViolationError",
  "Fixed",
  "FixedPointError",
  "IncomparableLimitsError",
  "InvalidLimitsError",
  "Limit",
  "Linear",
  "LinearIncomparable",
  "Model",
  "NotEqual",
  "NotIn",
  "Ordering",
  "PreconditionError",
  "TooHigh",
  "TooLow",
  "__version__",
  "three_way",
]
