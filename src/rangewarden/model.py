"""The constraint registry and its validation entry points."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from loguru import logger
import pandas as pd

from rangewarden.config import get_config
from rangewarden.constraints import Boundary, Fixed, Linear
from rangewarden.exceptions import ConstraintViolationError, PreconditionError

if TYPE_CHECKING:
  from collections.abc import Iterator, Mapping, Sequence

  from rangewarden.compare import Comparator
  from rangewarden.constraints import DoubleConstraint, Limit, SingleConstraint
  from rangewarden.violations import DoubleViolation, SingleViolation, Violation


class Model[T]:
  """Registry of constraints indexed by variable id or ordered id pair.

  Boundary and Fixed constraints are stored per variable id; Linear relations
  are stored per `(left_id, right_id)` pair with `left_id < right_id`.
  Constraints are only ever appended. A Boundary can be re-limited through the
  index `add_boundary` returns.

  Checking never mutates the model, so repeated checks with the same inputs
  return equal results.

  Example:
    ```python
    model = Model()
    model.add_boundary(0, top=Limit(20, inclusive=False), bottom=Limit(0))
    model.add_fixed(0, 10)
    model.add_linear(0, 1, Comparator.LE, multiplier=2, offset=1)

    model.check_single(0, 10)  # None
    model.check_single(0, 25)  # [TooHigh(...), NotEqual(...)]
    model.check_double(0, 3, 1, 6)  # [NotIn(...)]
    ```

  Args:
    value_type: Type of the constrained values. Determines the implicit limits
      of open-ended boundaries. Defaults to the configured `value_type`.
  """

  def __init__(self, value_type: type[Any] | None = None) -> None:
    self.value_type = value_type if value_type is not None else get_config().value_type
    self._single: dict[int, list[SingleConstraint]] = {}
    self._double: dict[tuple[int, int], list[DoubleConstraint]] = {}

  def __repr__(self) -> str:
    return (
      f"Model(value_type={self.value_type.__name__}, "
      + f"single={len(self._single)} ids, double={len(self._double)} pairs)"
    )

  def __len__(self) -> int:
    """Return the number of declared constraints."""
    return sum(len(v) for v in self._single.values()) + sum(
      len(v) for v in self._double.values()
    )

  # Declaration

  def add_boundary(
    self,
    id: int,
    top: Limit[T] | None = None,
    bottom: Limit[T] | None = None,
  ) -> int:
    """Declare a range constraint on variable `id`.

    The bucket for `id` is created even if the limits are rejected.

    Returns:
      The index of the new Boundary in the bucket for `id`, used as a handle
      by `set_top`, `set_bottom` and `update_boundary`.

    Raises:
      BoundaryError: If the limits do not form a valid range.
    """
    bucket = self._single.setdefault(id, [])
    bucket.append(Boundary(id, top=top, bottom=bottom))
    logger.debug("Declared boundary {} on x{}", bucket[-1].describe(), id)
    return len(bucket) - 1

  def add_fixed(self, id: int, value: T) -> None:
    """Declare that variable `id` must equal `value`."""
    fixed = Fixed(id, value)
    self._single.setdefault(id, []).append(fixed)
    logger.debug("Declared fixed {}", fixed.describe())

  def add_linear(
    self,
    left_id: int,
    right_id: int,
    comparator: Comparator | str,
    multiplier: Any = None,
    offset: Any = None,
  ) -> None:
    """Declare `(x[left_id] * multiplier + offset) <comparator> x[right_id]`.

    `comparator` may be given by symbol, e.g. "<=".

    Raises:
      PreconditionError: If `left_id >= right_id`. No bucket is created.
      ValueError: If `comparator` is an unknown symbol.
      TypeError: If `comparator` is neither a Comparator nor a string.
    """
    if left_id >= right_id:
      raise PreconditionError(
        f"add_linear requires left_id < right_id, got {left_id} and {right_id}"
      )
    linear = Linear(left_id, right_id, comparator, multiplier=multiplier, offset=offset)
    self._double.setdefault((left_id, right_id), []).append(linear)
    logger.debug("Declared linear relation {}", linear.describe())

  # Boundary handles

  def boundary(self, id: int, index: int) -> Boundary[T]:
    """Return the Boundary at `index` in the bucket for `id`.

    Raises:
      LookupError: If there is no constraint at that position.
      TypeError: If the constraint at that position is not a Boundary.
    """
    try:
      constraint = self._single[id][index]
    except (KeyError, IndexError) as e:
      raise LookupError(f"No constraint #{index} declared on x{id}") from e
    if not isinstance(constraint, Boundary):
      raise TypeError(
        f"Constraint #{index} on x{id} is {type(constraint).__name__}, not Boundary"
      )
    return constraint

  def set_top(self, id: int, index: int, top: Limit[T]) -> None:
    """Replace the top limit of a declared Boundary."""
    boundary = self.boundary(id, index)
    boundary.set_top(top)
    logger.debug("Boundary #{} on x{} is now {}", index, id, boundary.describe())

  def set_bottom(self, id: int, index: int, bottom: Limit[T]) -> None:
    """Replace the bottom limit of a declared Boundary."""
    boundary = self.boundary(id, index)
    boundary.set_bottom(bottom)
    logger.debug("Boundary #{} on x{} is now {}", index, id, boundary.describe())

  def update_boundary(
    self, id: int, index: int, top: Limit[T], bottom: Limit[T]
  ) -> None:
    """Replace both limits of a declared Boundary."""
    boundary = self.boundary(id, index)
    boundary.update(top, bottom)
    logger.debug("Boundary #{} on x{} is now {}", index, id, boundary.describe())

  # Validation

  def check_single(self, id: int, value: T) -> list[SingleViolation] | None:
    """Check `value` against every constraint declared on variable `id`.

    Returns:
      None if nothing fails, otherwise every violation, in declaration order.
    """
    errors: list[SingleViolation] = []
    for constraint in self._single.get(id, ()):
      if isinstance(constraint, Boundary):
        errors.extend(constraint.violations(value))
      elif (violation := constraint.satisfies(value)) is not None:
        errors.append(violation)
    return errors or None

  def check_double(
    self, left_id: int, left_value: T, right_id: int, right_value: T
  ) -> list[DoubleViolation] | None:
    """Check a pair of values against every relation declared on `(left_id, right_id)`.

    Ids must be passed in declaration order (smaller id on the left); a
    reversed pair names a different, normally empty, bucket.

    Returns:
      None if nothing fails, otherwise every violation, in declaration order.
    """
    errors: list[DoubleViolation] = []
    for constraint in self._double.get((left_id, right_id), ()):
      if (violation := constraint.evaluate(left_value, right_value)) is not None:
        errors.append(violation)
    return errors or None

  def _raise_or_warn(
    self, violations: Sequence[Violation] | None, warn_only: bool | None
  ) -> bool:
    if not violations:
      return True
    if warn_only is None:
      warn_only = get_config().warn_only
    error = ConstraintViolationError(violations)
    if warn_only:
      logger.error(str(error))
      return False
    raise error

  def validate_single(self, id: int, value: T, warn_only: bool | None = None) -> bool:
    """Like `check_single`, but raise on violations.

    Args:
      warn_only: Log violations and return False instead of raising. Defaults
        to the global `warn_only` setting.

    Raises:
      ConstraintViolationError: If any constraint fails and warn_only is off.
    """
    return self._raise_or_warn(self.check_single(id, value), warn_only)

  def validate_double(
    self,
    left_id: int,
    left_value: T,
    right_id: int,
    right_value: T,
    warn_only: bool | None = None,
  ) -> bool:
    """Like `check_double`, but raise on violations (see `validate_single`)."""
    return self._raise_or_warn(
      self.check_double(left_id, left_value, right_id, right_value), warn_only
    )

  def check_frame(self, frame: pd.DataFrame) -> pd.DataFrame:
    """Validate observations in bulk.

    Each column of `frame` holds the values of the variable whose id is the
    column label; each row is one observation.

    Returns:
      A DataFrame with columns `row`, `variables` and `constraint`, one line
      per failing (row, constraint). Empty if everything passes.

    Raises:
      ValueError: If a variable with declared constraints has no column.
    """
    # A rejected add_boundary leaves an empty bucket behind
    ids = {id for id, constraints in self._single.items() if constraints}
    for pair in self._double:
      ids.update(pair)
    missing = sorted(i for i in ids if i not in frame.columns)
    if missing:
      raise ValueError(f"Missing columns for constrained variables: {missing}")

    records: list[dict[str, Any]] = []

    def collect(mask: Any, variables: tuple[int, ...], description: str) -> None:
      for row in frame.index[~mask]:
        records.append(
          {"row": row, "variables": variables, "constraint": description}
        )

    for id, constraints in self._single.items():
      values = frame[id].to_numpy()
      for constraint in constraints:
        collect(constraint.validate_vectorized(values), (id,), constraint.describe())

    for (left_id, right_id), relations in self._double.items():
      left = frame[left_id].to_numpy()
      right = frame[right_id].to_numpy()
      for relation in relations:
        collect(
          relation.validate_vectorized(left, right),
          (left_id, right_id),
          relation.describe(),
        )

    return pd.DataFrame(records, columns=["row", "variables", "constraint"])

  # Introspection

  @property
  def single(self) -> Mapping[int, tuple[SingleConstraint, ...]]:
    """Read-only view of single-variable constraints by id."""
    return MappingProxyType({k: tuple(v) for k, v in self._single.items()})

  @property
  def double(self) -> Mapping[tuple[int, int], tuple[DoubleConstraint, ...]]:
    """Read-only view of two-variable constraints by ordered id pair."""
    return MappingProxyType({k: tuple(v) for k, v in self._double.items()})

  def iter_single(self) -> Iterator[tuple[int, SingleConstraint]]:
    """Yield `(id, constraint)` for every single-variable constraint."""
    for id, constraints in self._single.items():
      for constraint in constraints:
        yield id, constraint

  def iter_double(self) -> Iterator[tuple[tuple[int, int], DoubleConstraint]]:
    """Yield `((left_id, right_id), relation)` for every two-variable constraint."""
    for pair, relations in self._double.items():
      for relation in relations:
        yield pair, relation

  def to_frame(self) -> pd.DataFrame:
    """Tabulate single-variable constraints for drawing.

    Boundaries report their effective limits (open sides resolved to the
    value type's bounds); fixed constraints report their value as both
    bottom and top.

    Returns:
      A DataFrame with columns `id`, `kind`, `bottom`, `bottom_inclusive`,
      `top`, `top_inclusive`.
    """
    records = []
    for id, constraint in self.iter_single():
      if isinstance(constraint, Boundary):
        bottom = constraint.effective_bottom(self.value_type)
        top = constraint.effective_top(self.value_type)
        records.append(
          {
            "id": id,
            "kind": "boundary",
            "bottom": bottom.point,
            "bottom_inclusive": bottom.inclusive,
            "top": top.point,
            "top_inclusive": top.inclusive,
          }
        )
      else:
        records.append(
          {
            "id": id,
            "kind": "fixed",
            "bottom": constraint.value,
            "bottom_inclusive": True,
            "top": constraint.value,
            "top_inclusive": True,
          }
        )
    return pd.DataFrame(
      records,
      columns=["id", "kind", "bottom", "bottom_inclusive", "top", "top_inclusive"],
    )
