"""Button field."""

from mutt_forms.widgets import Button
from .core import Field


class ButtonField(Field):
    """A field that only renders a button; it contributes no form data."""

    default_widget = Button
    has_value = False
