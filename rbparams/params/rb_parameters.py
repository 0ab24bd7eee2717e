"""
Named scalar parameters for reduced-basis models.

``RBParameters`` stores two independent sets of values:

- training parameters, which the RB sampling and training algorithms read;
- extra parameters, which travel with the object but are never consulted by
  those algorithms.

Both sets are ``ScalarPartition`` instances. Only lookups, iteration and
copies are exposed; the underlying storage stays private.
"""

import copy
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterator, Mapping, Optional, Set, SupportsFloat, Tuple, Union

from rbparams.utils import format_value, log_section
from .base_params import ParameterSetConfig
from .partition import ScalarPartition, _MISSING, check_precision

logger = logging.getLogger(__name__)


class RBParameters:
    """
    A set of scalar parameters indexed by name.

    Constructing from a mapping fills the training parameters only; the extra
    parameters start empty.

    Two objects compare equal when their training parameters are identical.
    Extra parameters do not take part in the comparison.
    """

    __slots__ = ("_parameters", "_extra_parameters", "_precision")

    def __init__(
        self,
        parameter_map: Optional[Mapping[str, SupportsFloat]] = None,
        precision: int = 6,
    ):
        self._parameters = ScalarPartition("parameter", parameter_map)
        self._extra_parameters = ScalarPartition("extra parameter")
        self._precision = check_precision(precision)

    @classmethod
    def from_config(cls, config: ParameterSetConfig) -> "RBParameters":
        """
        Build an object holding the training and extra values of ``config``.

        The configured precision becomes the default for dumps, and the
        configured log level is applied to the rbparams loggers.
        """
        config.setup_logging()
        params = cls(config.parameters, precision=config.precision)
        params.update_extra(config.extra_parameters)
        logger.debug(
            f"Created {cls.__name__} with {params.n_parameters()} parameters "
            f"and {params.n_extra_parameters()} extra parameters"
        )
        return params

    @classmethod
    def from_config_file(
        cls,
        config_path: Union[str, Path],
        override_kwargs: Optional[Dict[str, Any]] = None,
    ) -> "RBParameters":
        config = ParameterSetConfig.from_file(config_path, override_kwargs)
        return cls.from_config(config)

    @property
    def precision(self) -> int:
        """Default number of digits after the decimal point in dumps."""
        return self._precision

    @precision.setter
    def precision(self, value: int) -> None:
        self._precision = check_precision(value)

    def clear(self) -> None:
        """Remove all training and extra parameters."""
        self._parameters.clear()
        self._extra_parameters.clear()

    # Training parameters

    def has_value(self, param_name: str) -> bool:
        return self._parameters.has(param_name)

    def get_value(self, param_name: str, default_val=_MISSING) -> float:
        """
        Get the value of ``param_name``.

        Raises ``ParameterNotFoundError`` if the parameter does not exist and
        no ``default_val`` was given.
        """
        return self._parameters.get(param_name, default_val)

    def set_value(self, param_name: str, value: SupportsFloat) -> None:
        """Set ``param_name`` to ``value``, adding it if it doesn't exist yet."""
        self._parameters.set(param_name, value)

    def erase_parameter(self, param_name: str) -> None:
        """Remove ``param_name``; does nothing if it is not present."""
        self._parameters.erase(param_name)

    def n_parameters(self) -> int:
        return len(self._parameters)

    def get_parameter_names(self) -> Set[str]:
        return self._parameters.names()

    def items(self) -> Iterator[Tuple[str, float]]:
        """Iterate ``(name, value)`` pairs of the training parameters by name."""
        return self._parameters.items()

    def update(self, values: Mapping[str, SupportsFloat], verbose: bool = False) -> None:
        """Set every name/value pair in ``values``, logging changes if verbose."""
        self._update_partition(self._parameters, values, verbose)

    # Extra parameters

    def has_extra_value(self, param_name: str) -> bool:
        return self._extra_parameters.has(param_name)

    def get_extra_value(self, param_name: str, default_val=_MISSING) -> float:
        return self._extra_parameters.get(param_name, default_val)

    def set_extra_value(self, param_name: str, value: SupportsFloat) -> None:
        self._extra_parameters.set(param_name, value)

    def erase_extra_parameter(self, param_name: str) -> None:
        self._extra_parameters.erase(param_name)

    def n_extra_parameters(self) -> int:
        return len(self._extra_parameters)

    def get_extra_parameter_names(self) -> Set[str]:
        return self._extra_parameters.names()

    def extra_items(self) -> Iterator[Tuple[str, float]]:
        return self._extra_parameters.items()

    def update_extra(
        self, values: Mapping[str, SupportsFloat], verbose: bool = False
    ) -> None:
        self._update_partition(self._extra_parameters, values, verbose)

    @staticmethod
    def _update_partition(
        partition: ScalarPartition,
        values: Mapping[str, SupportsFloat],
        verbose: bool,
    ) -> None:
        converted = {name: float(value) for name, value in values.items()}
        for name, value in converted.items():
            old_value = partition.get(name, None)
            partition.set(name, value)
            if verbose and old_value != value:
                logger.info(
                    f"{partition.label.capitalize()} '{name}' changed "
                    f"from {old_value} to {value}."
                )

    # Copies

    def copy(self) -> "RBParameters":
        """Return an independent copy of both parameter sets."""
        duplicate = type(self).__new__(type(self))
        duplicate._precision = self._precision
        duplicate._parameters = self._parameters.copy()
        duplicate._extra_parameters = self._extra_parameters.copy()
        return duplicate

    def take(self) -> "RBParameters":
        """Move all values into a new object, leaving this one empty."""
        moved = type(self).__new__(type(self))
        moved._precision = self._precision
        moved._parameters = self._parameters.take()
        moved._extra_parameters = self._extra_parameters.take()
        return moved

    def __copy__(self) -> "RBParameters":
        return self.copy()

    def __deepcopy__(self, memo) -> "RBParameters":
        return self.copy()

    # Output

    def get_string(self, precision: Optional[int] = None) -> str:
        """
        Get a string listing the training parameters, one ``name=value`` line
        each, sorted by name. ``precision`` is the number of digits after the
        decimal point in scientific notation; ``None`` uses ``self.precision``.
        """
        if precision is None:
            precision = self._precision
        return "".join(
            f"{line}\n" for line in self._parameters.format_lines(precision)
        )

    to_string = get_string

    def print(self, file=None) -> None:
        """Write ``get_string()`` to ``file`` (standard error by default)."""
        stream = sys.stderr if file is None else file
        stream.write(self.get_string())
        stream.flush()

    def to_dict(self) -> Dict[str, Dict[str, float]]:
        """Sorted copies of both parameter sets."""
        return {
            "parameters": self._parameters.to_dict(),
            "extra_parameters": self._extra_parameters.to_dict(),
        }

    def log_summary(
        self,
        log: Optional[logging.Logger] = None,
        level: int = logging.INFO,
        precision: Optional[int] = None,
    ) -> None:
        """Log training and extra parameters as two titled sections."""
        log = log or logger
        precision = check_precision(
            self._precision if precision is None else precision
        )
        for title, partition in (
            ("Parameters", self._parameters),
            ("Extra parameters", self._extra_parameters),
        ):
            entries = [
                (name, format_value(value, precision=precision), None)
                for name, value in partition.items()
            ]
            log_section(log, title, entries, level=level)

    # Python protocol

    erase = erase_parameter
    names = get_parameter_names
    extra_names = get_extra_parameter_names

    def __iter__(self) -> Iterator[Tuple[str, float]]:
        return self.items()

    def __len__(self) -> int:
        return self.n_parameters()

    def __contains__(self, param_name: object) -> bool:
        return param_name in self._parameters

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RBParameters):
            return NotImplemented
        return self._parameters == other._parameters

    __hash__ = None

    def __repr__(self) -> str:
        extra = self._extra_parameters.to_dict()
        if extra:
            return f"RBParameters({self._parameters.to_dict()!r}, extra={extra!r})"
        return f"RBParameters({self._parameters.to_dict()!r})"


if __name__ == "__main__":
    params = RBParameters({"mu_0": 0.1, "mu_1": 2.0})
    params.set_extra_value("theta", 3.5)
    params.print(sys.stdout)
    print(f"n_parameters: {params.n_parameters()}")
    print(f"mu_2 with default: {params.get_value('mu_2', -1.0)}")
    print(f"Copy equal: {params == copy.deepcopy(params)}")
