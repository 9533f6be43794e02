"""Choice (enum) field."""

from typing import Any, Dict, List, Mapping, Tuple

from mutt_forms.widgets import Select
from .core import Field


class ChoiceField(Field):
    """
    Field whose value is one of a fixed set of choices.

    The ``choices`` option accepts:
    - a mapping of value -> label
    - a sequence of (value, label) pairs
    - a sequence of plain values (labelled with str(value))

    Schema keywords: enum, plus an optional ``enumNames`` list of labels.
    """

    default_widget = Select

    @classmethod
    def kwargs_from_schema(cls, schema: Mapping[str, Any]) -> Dict[str, Any]:
        kwargs = super().kwargs_from_schema(schema)
        if "enum" in schema:
            values = list(schema["enum"])
            labels = schema.get("enumNames") or [str(value) for value in values]
            kwargs.setdefault("choices", list(zip(values, labels)))
        return kwargs

    def get_choices(self) -> List[Tuple[Any, str]]:
        """Choices normalized to (value, label) pairs."""
        choices = self.options.get("choices") or []
        if isinstance(choices, Mapping):
            return [(value, str(label)) for value, label in choices.items()]

        normalized = []
        for choice in choices:
            if isinstance(choice, tuple) and len(choice) == 2:
                normalized.append((choice[0], str(choice[1])))
            else:
                normalized.append((choice, str(choice)))
        return normalized
