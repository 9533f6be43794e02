"""Boolean field."""

from mutt_forms.validators import BooleanRequiredValidator
from mutt_forms.widgets import CheckboxInput
from .core import Field


class BooleanField(Field):
    """
    True/False field.

    ``required=True`` means a boolean must have been supplied (False is a
    valid answer). Add a BooleanTrueValidator for "must be ticked" boxes.
    """

    default_widget = CheckboxInput
    required_validator = BooleanRequiredValidator
