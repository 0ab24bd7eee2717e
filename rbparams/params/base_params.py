"""
Error types and configuration handling for rbparams using Pydantic.

Configuration files describe the initial contents of an ``RBParameters``
object (training and extra values) together with the dump precision and the
logging level. Values are validated on load so that a malformed file fails
before any reduced-basis code sees it.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing import Dict, Any, Optional, Union
from pathlib import Path
import yaml
import json
import logging
from rbparams.utils import configure_logging

logger = logging.getLogger(__name__)


class RBParametersError(Exception):
    """Base class for all rbparams errors."""


class ParameterNotFoundError(RBParametersError, KeyError):
    """Lookup of a name that is not present in the requested partition."""

    def __init__(self, name: str, partition: str = "parameter"):
        self.name = name
        self.partition = partition
        super().__init__(name)

    def __str__(self) -> str:
        return f"No {self.partition} named '{self.name}'"


class ParameterValidationError(RBParametersError, ValueError):
    """Custom validation error for parameter and configuration values."""

    def __init__(self, message: str, field_name: Optional[str] = None):
        self.field_name = field_name
        super().__init__(f"{field_name}: {message}" if field_name else message)


class ParameterConfigError(RBParametersError):
    """Configuration-specific error with context information."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        self.context = context or {}
        super().__init__(f"{message}\nContext: {self.context}")


class ParameterSetConfig(BaseModel):
    """
    Validated description of a parameter set.

    Precedence (lowest to highest priority):
    1. Pydantic field defaults
    2. Configuration file values
    3. Direct override kwargs (programmatic use)
    """

    parameters: Dict[str, float] = Field(
        default_factory=dict, description="Training parameter values by name"
    )
    extra_parameters: Dict[str, float] = Field(
        default_factory=dict,
        description="Extra values carried along but not used for RB training",
    )
    precision: int = Field(
        default=6, ge=0, description="Digits after the decimal point in dumps"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    @field_validator("parameters", "extra_parameters", mode="before")
    @classmethod
    def reject_boolean_values(cls, v):
        """Keep YAML booleans from being read as 0.0 or 1.0."""
        if isinstance(v, dict):
            flags = sorted(name for name, value in v.items() if isinstance(value, bool))
            if flags:
                raise ValueError(f"Boolean values are not scalars: {flags}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log_level is valid."""
        if isinstance(v, str):
            v = v.upper()
            if v not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
                raise ValueError(f"Invalid log level: {v}")
        return v

    @classmethod
    def from_file(
        cls,
        config_path: Union[str, Path],
        override_kwargs: Optional[Dict[str, Any]] = None,
    ) -> "ParameterSetConfig":
        """
        Create a config instance from a file plus optional overrides.

        Mapping-valued overrides (``parameters``, ``extra_parameters``) are
        merged into the file's mapping name by name; scalar overrides replace
        the file value.

        Args:
            config_path: Path to YAML/JSON configuration file
            override_kwargs: Direct parameter overrides (highest priority)

        Returns:
            Validated configuration

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ParameterConfigError: If the config file cannot be parsed
            ParameterValidationError: If the merged values are invalid
        """
        params = cls.load_config_file(config_path)
        logger.debug(f"Loaded {len(params)} entries from config file: {config_path}")

        if override_kwargs:
            params = cls.merge_overrides(params, override_kwargs)
            logger.debug(f"Applied {len(override_kwargs)} direct overrides")

        try:
            return cls(**params)
        except ValidationError as e:
            error_context = {
                "provided_keys": sorted(params.keys()),
                "config_path": str(config_path),
                "has_overrides": override_kwargs is not None,
            }
            logger.error(f"Error Context: {error_context}")
            raise ParameterValidationError(
                f"Parameter validation failed: {e}", "validation"
            ) from e

    @classmethod
    def load_config_file(cls, config_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Load configuration from YAML or JSON file.

        Args:
            config_path: Path to configuration file

        Returns:
            Dictionary of configuration entries

        Raises:
            FileNotFoundError: If config file doesn't exist
            ParameterConfigError: If file format is unsupported or parsing fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        suffix = config_path.suffix.lower()
        if suffix not in [".yml", ".yaml", ".json"]:
            raise ParameterConfigError(
                f"Unsupported config file format: {config_path.suffix}. "
                f"Supported formats: .yml, .yaml, .json",
                {"config_path": str(config_path)},
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if suffix == ".json":
                    data = json.load(f) or {}
                else:
                    data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ParameterConfigError(
                f"Failed to parse {config_path}", {"error": str(e)}
            ) from e

        if not isinstance(data, dict):
            raise ParameterConfigError(
                f"Config file must contain a mapping: {config_path}",
                {"type": type(data).__name__},
            )
        return data

    @classmethod
    def merge_overrides(
        cls, config: Dict[str, Any], updates: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Return ``config`` with ``updates`` applied on top of it."""
        merged = dict(config)
        for key, value in updates.items():
            old_value = merged.get(key)
            if isinstance(old_value, dict) and isinstance(value, dict):
                merged[key] = {**old_value, **value}
            else:
                merged[key] = value
            if old_value != merged[key]:
                logger.debug(f"Override '{key}' changed from {old_value} to {value}.")
        return merged

    def setup_logging(self) -> logging.Logger:
        """Apply log_level to the rbparams loggers, keeping existing root handlers."""
        configured = configure_logging(self.log_level, logger_name="rbparams", force=False)
        logger.info(f"Logging configured at {self.log_level} level")
        return configured
