"""Object field - a named group of child fields."""

from typing import Any, Dict, List, Mapping, Optional, TYPE_CHECKING

from mutt_forms.widgets import Fieldset
from .core import Field, field_from_schema

if TYPE_CHECKING:
    from mutt_forms.registry import MuttRegistry


class ObjectField(Field):
    """
    Container of named child fields. Its value is a dict of child values.

    Args:
        properties: Mapping of child name -> Field, in display order
    """

    default_widget = Fieldset

    def __init__(self, name: str, properties: Optional[Mapping[str, Field]] = None,
                 initial: Any = None, **kwargs: Any):
        self.properties: Dict[str, Field] = dict(properties or {})
        super().__init__(name, initial=None, **kwargs)
        if initial:
            self.value = initial
        self.initial = initial

    @classmethod
    def from_schema(cls, name: str, schema: Mapping[str, Any], required: bool = False,
                    registry: Optional["MuttRegistry"] = None) -> "ObjectField":
        if registry is None:
            from mutt_forms.registry import get_registry
            registry = get_registry()

        required_children = set(schema.get("required") or [])
        properties = {
            child_name: field_from_schema(
                child_name, child_schema, registry, required=child_name in required_children
            )
            for child_name, child_schema in (schema.get("properties") or {}).items()
        }
        return cls(name, properties=properties, required=required, registry=registry,
                   **cls.kwargs_from_schema(schema))

    @property
    def value(self) -> Dict[str, Any]:
        return {
            child_name: child.value
            for child_name, child in self.properties.items()
            if child.has_value
        }

    @value.setter
    def value(self, value: Optional[Mapping[str, Any]]) -> None:
        for child_name, child_value in (value or {}).items():
            if child_name in self.properties:
                self.properties[child_name].value = child_value

    def get_children(self) -> List[Field]:
        return list(self.properties.values())

    def validate(self) -> bool:
        """Validate this field's own chain, then every child."""
        own = super().validate()
        children = [child.validate() for child in self.properties.values()]
        return own and all(children)

    @property
    def is_valid(self) -> bool:
        return not self._errors and all(child.is_valid for child in self.properties.values())

    def collect_errors(self) -> Dict[str, List[str]]:
        collected = super().collect_errors()
        for child in self.properties.values():
            for path, errors in child.collect_errors().items():
                collected[f"{self.name}.{path}"] = errors
        return collected
