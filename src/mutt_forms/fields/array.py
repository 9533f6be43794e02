"""Array field - a variable-length list of same-typed fields."""

from typing import Any, Dict, List, Mapping, Optional, TYPE_CHECKING

from mutt_forms.validators import LengthValidator
from mutt_forms.widgets import Fieldset
from .core import Field, field_from_schema

if TYPE_CHECKING:
    from mutt_forms.registry import MuttRegistry


class ArrayField(Field):
    """
    List of item fields built from one item schema. Its value is the list
    of item values.

    Items are named by their index ("0", "1", ...), so their errors are
    reported as ``<name>.<index>``.

    Args:
        items: Schema entry used to build each item (defaults to strings)

    Schema keywords: items, minItems, maxItems.
    """

    default_widget = Fieldset

    def __init__(self, name: str, items: Optional[Mapping[str, Any]] = None,
                 initial: Any = None, **kwargs: Any):
        self.items: Mapping[str, Any] = dict(items or {"type": "string"})
        self.slots: List[Field] = []
        super().__init__(name, initial=None, **kwargs)
        if initial:
            self.value = initial
        self.initial = initial

    @classmethod
    def kwargs_from_schema(cls, schema: Mapping[str, Any]) -> Dict[str, Any]:
        kwargs = super().kwargs_from_schema(schema)
        if "items" in schema:
            kwargs["items"] = schema["items"]
        if "minItems" in schema or "maxItems" in schema:
            kwargs["validators"] = list(kwargs.get("validators", [])) + [LengthValidator(
                min_length=schema.get("minItems"),
                max_length=schema.get("maxItems"),
                allow_empty=True,
            )]
        return kwargs

    def _build_item(self, index: int) -> Field:
        return field_from_schema(str(index), self.items, self.get_registry())

    def add_item(self, value: Any = None) -> Field:
        """Append a new item field and return it."""
        item = self._build_item(len(self.slots))
        if value is not None:
            item.value = value
        self.slots.append(item)
        return item

    def remove_item(self, index: int) -> None:
        """Remove the item at ``index`` and renumber the rest."""
        values = self.value
        del values[index]
        self.value = values

    @property
    def value(self) -> List[Any]:
        return [item.value for item in self.slots]

    @value.setter
    def value(self, value: Optional[List[Any]]) -> None:
        self.slots = []
        for item_value in value or []:
            self.add_item(item_value)

    def get_children(self) -> List[Field]:
        return list(self.slots)

    def validate(self) -> bool:
        """Validate this field's own chain, then every item."""
        own = super().validate()
        items = [item.validate() for item in self.slots]
        return own and all(items)

    @property
    def is_valid(self) -> bool:
        return not self._errors and all(item.is_valid for item in self.slots)

    def collect_errors(self) -> Dict[str, List[str]]:
        collected = super().collect_errors()
        for item in self.slots:
            for path, errors in item.collect_errors().items():
                collected[f"{self.name}.{path}"] = errors
        return collected
