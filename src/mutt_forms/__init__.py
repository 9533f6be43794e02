"""
mutt-forms: dynamic forms for PyQt6 built from an extensible type registry.

Given an abstract schema, mutt-forms builds typed fields, attaches validators
and renders them through pluggable widgets.

Architecture:
- Validators: synchronous pass/fail rules with error messages
- Widgets: render a field into a Qt node through capability ABCs
- Fields: value + ordered validator chain + widget reference
- MuttRegistry: field types, widgets, settings and extensions; plugins
  extend it through use()
- MuttForm: builds fields from a registry and carries plugin extensions
"""

__version__ = "0.1.0"

from .exceptions import (
    MuttFormsError,
    ConfigurationError,
    InvalidPluginError,
    UnknownFieldTypeError,
)
from .registry import MuttRegistry, get_registry, set_registry, reset_registry
from .forms import MuttForm

__all__ = [
    "__version__",
    "MuttFormsError",
    "ConfigurationError",
    "InvalidPluginError",
    "UnknownFieldTypeError",
    "MuttRegistry",
    "get_registry",
    "set_registry",
    "reset_registry",
    "MuttForm",
]
