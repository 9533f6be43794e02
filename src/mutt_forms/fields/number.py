"""Integer field."""

from typing import Any, Dict, List, Mapping

from mutt_forms.validators import IntegerValidator, Validator
from mutt_forms.widgets import IntegerInput
from .core import Field


class IntegerField(Field):
    """
    Integer field. Always carries an IntegerValidator.

    Schema keywords: minimum, maximum (passed to the widget as its range).
    """

    default_widget = IntegerInput

    @classmethod
    def kwargs_from_schema(cls, schema: Mapping[str, Any]) -> Dict[str, Any]:
        kwargs = super().kwargs_from_schema(schema)
        for key in ("minimum", "maximum"):
            if key in schema:
                kwargs.setdefault(key, schema[key])
        return kwargs

    def default_validators(self) -> List[Validator]:
        return [IntegerValidator()]
