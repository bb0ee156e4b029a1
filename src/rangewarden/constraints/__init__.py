"""Constraint kinds and the closed unions the Model stores them as."""

from rangewarden.constraints.boundary import Boundary, Limit
from rangewarden.constraints.fixed import Fixed
from rangewarden.constraints.linear import Linear

type SingleConstraint = Boundary | Fixed
type DoubleConstraint = Linear

__all__ = [
  "Boundary",
  "DoubleConstraint",
  "Fixed",
  "Limit",
  "Linear",
  "SingleConstraint",
]
