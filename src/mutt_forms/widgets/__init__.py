"""
Widgets render fields into Qt nodes.

None of these are registered by default; fields reference their default
widget class directly, and registry widgets override it by name.
"""

from .core import Widget
from .text import TextInput
from .number import IntegerInput
from .checkbox import CheckboxInput
from .select import Select
from .button import Button
from .fieldset import Fieldset

__all__ = [
    "Widget",
    "TextInput",
    "IntegerInput",
    "CheckboxInput",
    "Select",
    "Button",
    "Fieldset",
]
