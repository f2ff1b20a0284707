"""Helper utilities for hypr-scripts modules."""

from .general_helpers import ScriptConfig, SUITE_NAME
from .module_helpers import create_module_parser

__all__ = [
    "ScriptConfig",
    "SUITE_NAME",
    "create_module_parser",
]
