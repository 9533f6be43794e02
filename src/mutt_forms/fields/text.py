"""String field."""

from typing import Any, Dict, Mapping

from mutt_forms.validators import LengthValidator, RegexValidator
from mutt_forms.widgets import TextInput
from .core import Field


class StringField(Field):
    """
    Free text field. Also registered for ``date`` and ``datetime`` types.

    Schema keywords: minLength, maxLength, pattern. Their validators let an
    empty value through; emptiness is only an error for required fields.
    """

    default_widget = TextInput

    @classmethod
    def kwargs_from_schema(cls, schema: Mapping[str, Any]) -> Dict[str, Any]:
        kwargs = super().kwargs_from_schema(schema)
        validators = list(kwargs.pop("validators", []))

        if "minLength" in schema or "maxLength" in schema:
            validators.append(LengthValidator(
                min_length=schema.get("minLength"),
                max_length=schema.get("maxLength"),
                allow_empty=True,
            ))
            if schema.get("maxLength"):
                kwargs.setdefault("max_length", schema["maxLength"])

        if "pattern" in schema:
            validators.append(RegexValidator(schema["pattern"], allow_empty=True))

        if validators:
            kwargs["validators"] = validators
        return kwargs
