"""
Named-scalar storage shared by the training and extra parameter partitions.

A ``ScalarPartition`` maps parameter names to float values. ``RBParameters``
holds two independent instances of it, so every lookup, mutation and
formatting rule is written once here.
"""

import operator
from typing import Dict, Iterator, List, Set, SupportsFloat, Tuple

from .base_params import ParameterNotFoundError, ParameterValidationError

_MISSING = object()


def format_scalar(value: float, precision: int = 6) -> str:
    """Render a scalar in scientific notation with ``precision`` decimals."""
    return f"{value:.{precision}e}"


def check_precision(precision: int) -> int:
    """Reject non-integer and negative precisions before any formatting happens."""
    try:
        precision = operator.index(precision)
    except TypeError:
        raise ParameterValidationError(
            f"precision must be an integer, got {precision!r}", "precision"
        ) from None
    if precision < 0:
        raise ParameterValidationError(
            f"precision must be >= 0, got {precision}", "precision"
        )
    return precision


class ScalarPartition:
    """
    Mapping from parameter name to float value with sorted iteration.

    The storage container is private. Callers only see copies of the names
    and values, so the representation can change without breaking them.
    """

    __slots__ = ("label", "_values")

    def __init__(self, label: str = "parameter", values=None):
        self.label = label
        self._values: Dict[str, float] = {}
        if values:
            for name, value in values.items():
                self.set(name, value)

    def has(self, name: str) -> bool:
        return name in self._values

    def get(self, name: str, default=_MISSING) -> float:
        """
        Return the value stored under ``name``.

        Without ``default`` a missing name raises ``ParameterNotFoundError``,
        otherwise ``default`` is returned unchanged.
        """
        try:
            return self._values[name]
        except KeyError:
            if default is _MISSING:
                raise ParameterNotFoundError(name, self.label) from None
            return default

    def set(self, name: str, value: SupportsFloat) -> None:
        self._values[name] = float(value)

    def erase(self, name: str) -> None:
        self._values.pop(name, None)

    def clear(self) -> None:
        self._values.clear()

    def names(self) -> Set[str]:
        return set(self._values)

    def sorted_items(self) -> List[Tuple[str, float]]:
        return sorted(self._values.items())

    def items(self) -> Iterator[Tuple[str, float]]:
        """Iterate ``(name, value)`` pairs by ascending name.

        The pairs are captured when this is called, so later mutations do not
        affect an iterator that is already running.
        """
        return iter(self.sorted_items())

    def to_dict(self) -> Dict[str, float]:
        return dict(self.sorted_items())

    def format_lines(self, precision: int = 6) -> List[str]:
        precision = check_precision(precision)
        return [
            f"{name}={format_scalar(value, precision)}"
            for name, value in self.sorted_items()
        ]

    def copy(self) -> "ScalarPartition":
        duplicate = ScalarPartition(self.label)
        duplicate._values = dict(self._values)
        return duplicate

    def take(self) -> "ScalarPartition":
        """Hand the stored values to a new partition and leave this one empty."""
        moved = ScalarPartition(self.label)
        moved._values, self._values = self._values, {}
        return moved

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScalarPartition):
            return NotImplemented
        if len(self._values) != len(other._values):
            return False
        for name, value in self._values.items():
            if name not in other._values or other._values[name] != value:
                return False
        return True

    __hash__ = None

    def __repr__(self) -> str:
        return f"ScalarPartition({self.label!r}, {self.to_dict()!r})"
