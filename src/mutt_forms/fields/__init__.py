"""
Field classes.

These are the defaults bound in every new MuttRegistry; plugins can replace
any of them or add new types.
"""

from .core import Field, field_from_schema
from .array import ArrayField
from .button import ButtonField
from .boolean import BooleanField
from .choice import ChoiceField
from .number import IntegerField
from .object import ObjectField
from .text import StringField

__all__ = [
    "Field",
    "field_from_schema",
    "ArrayField",
    "ButtonField",
    "BooleanField",
    "ChoiceField",
    "IntegerField",
    "ObjectField",
    "StringField",
]
