"""
# Parameter Containers for Reduced-Basis Models

1. Storage → ScalarPartition

- One name → float mapping with sorted iteration
- Private storage, only copies leave the object

2. Parameter Sets → RBParameters

- Training parameters read by RB sampling/training
- Extra parameters carried alongside, ignored by equality
- Deterministic text dumps in scientific notation

3. Configuration → Pydantic Classes

- YAML/JSON loading with override precedence
- Validation of values, precision and log level
"""

from .base_params import (
    ParameterSetConfig,
    RBParametersError,
    ParameterNotFoundError,
    ParameterValidationError,
    ParameterConfigError,
)
from .partition import ScalarPartition, format_scalar
from .rb_parameters import RBParameters
