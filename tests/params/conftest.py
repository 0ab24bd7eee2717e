"""
Pytest configuration and shared fixtures for parameter tests.

This file provides common fixtures and utilities used across
all parameter-related test modules.
"""

import json
import logging
import pytest
import tempfile
import yaml
from pathlib import Path
from typing import Dict, Any

from rbparams.params import RBParameters


@pytest.fixture(autouse=True)
def restore_package_log_level():
    """Undo log levels applied while loading configs."""
    package_logger = logging.getLogger("rbparams")
    level = package_logger.level
    yield package_logger
    package_logger.setLevel(level)


@pytest.fixture
def temp_config_file():
    """
    Fixture that creates and cleans up temporary config files.

    Usage:
        def test_example(temp_config_file):
            config_path = temp_config_file({"parameters": {"mu_0": 0.1}})
            config_path = temp_config_file({...}, suffix=".json")
            # Cleanup happens automatically
    """
    created_files = []

    def _create_config(config_data: Dict[str, Any], suffix: str = ".yaml") -> Path:
        """Create a temporary config file with the given data."""
        temp_file = tempfile.NamedTemporaryFile(
            mode="w", suffix=suffix, delete=False, encoding="utf-8"
        )
        if suffix == ".json":
            json.dump(config_data, temp_file)
        else:
            yaml.dump(config_data, temp_file, default_flow_style=False)
        temp_file.close()
        config_path = Path(temp_file.name)
        created_files.append(config_path)
        return config_path

    yield _create_config

    for file_path in created_files:
        if file_path.exists():
            file_path.unlink()


@pytest.fixture
def parameter_map():
    return {"mu_0": 0.1, "mu_1": 2.0}


@pytest.fixture
def rb_parameters(parameter_map):
    """Two training parameters and one extra parameter."""
    params = RBParameters(parameter_map)
    params.set_extra_value("theta", 3.5)
    return params
