"""
Field base class.

A Field binds one value to an ordered chain of validators and to the widget
that renders it.

Validation is fail-fast: validators run in the order they were added and the
first failure stops the chain, so ``errors`` holds at most one message for a
plain field. Container fields (objects, arrays) report their children's
errors under dotted paths via collect_errors().

Widget resolution (get_widget):
1. ``widget`` given as a class/factory -> used as-is
2. ``widget`` given as a name registered in the registry -> registry entry
3. otherwise the field class's ``default_widget``
"""

from typing import Any, Callable, ClassVar, Dict, List, Mapping, Optional, Type, TYPE_CHECKING
import logging

from PyQt6.QtWidgets import QFormLayout, QWidget

from mutt_forms.exceptions import UnknownFieldTypeError
from mutt_forms.protocols.form_config import get_form_config
from mutt_forms.protocols.widget_protocols import ChangeSignalEmitter
from mutt_forms.validators import Validator, RequiredValidator
from mutt_forms.widgets import Widget, TextInput

if TYPE_CHECKING:
    from mutt_forms.registry import MuttRegistry

logger = logging.getLogger(__name__)


class Field:
    """
    Base field.

    Args:
        name: Field name, unique within its form or container
        label: Display label (defaults to the name)
        initial: Initial value
        widget: Widget class/factory, or the name of a registered widget
        validators: Extra validators, run after the built-in ones
        attribs: Attributes passed through to the widget
        description: Help text, shown as a tooltip
        required: Prepend the class's required validator
        registry: Registry used to resolve widget names (default registry if None)
        **options: Field-specific options (placeholder, choices, ...)
    """

    default_widget: ClassVar[Type[Widget]] = TextInput
    required_validator: ClassVar[Type[Validator]] = RequiredValidator
    # False for fields that carry no data (buttons)
    has_value: ClassVar[bool] = True

    def __init__(self, name: str, label: Optional[str] = None, initial: Any = None,
                 widget: Any = None, validators: Optional[List[Validator]] = None,
                 attribs: Optional[Dict[str, Any]] = None, description: Optional[str] = None,
                 required: bool = False, registry: Optional["MuttRegistry"] = None,
                 **options: Any):
        self.name = name
        self.label = label if label is not None else name
        self.initial = initial
        self.widget = widget
        self.attribs: Dict[str, Any] = dict(attribs or {})
        self.description = description
        self.required = required
        self.registry = registry
        self.options: Dict[str, Any] = options

        self.validators: List[Validator] = []
        if required:
            self.validators.append(self.required_validator())
        self.validators.extend(self.default_validators())
        self.validators.extend(validators or [])

        self._value = initial
        self._errors: List[str] = []

    # ==================== SCHEMA ====================

    @classmethod
    def kwargs_from_schema(cls, schema: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Translate a JSON-schema-like entry into constructor kwargs.

        Recognized keys: title, default, description and ``options`` (passed
        through verbatim, e.g. ``{"widget": "textarea"}``). Subclasses extend
        this for their own keywords.
        """
        kwargs: Dict[str, Any] = {}
        if "title" in schema:
            kwargs["label"] = schema["title"]
        if "default" in schema:
            kwargs["initial"] = schema["default"]
        if "description" in schema:
            kwargs["description"] = schema["description"]
        kwargs.update(schema.get("options") or {})
        return kwargs

    @classmethod
    def from_schema(cls, name: str, schema: Mapping[str, Any], required: bool = False,
                    registry: Optional["MuttRegistry"] = None) -> "Field":
        return cls(name, required=required, registry=registry, **cls.kwargs_from_schema(schema))

    # ==================== VALUE ====================

    @property
    def value(self) -> Any:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        self._value = value

    def get_value(self) -> Any:
        return self.value

    def set_value(self, value: Any) -> None:
        self.value = value

    # ==================== VALIDATION ====================

    def default_validators(self) -> List[Validator]:
        """Validators every instance of this field class gets."""
        return []

    def add_validator(self, validator: Validator) -> None:
        self.validators.append(validator)

    def validate(self) -> bool:
        """
        Run the validator chain against the current value.

        Returns:
            True if every validator passed
        """
        self._errors = []
        value = self.value
        for validator in self.validators:
            if not validator.validate(value):
                self._errors.append(validator.error)
                break
        return not self._errors

    @property
    def errors(self) -> List[str]:
        """Errors from the last validate() call."""
        return list(self._errors)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def collect_errors(self) -> Dict[str, List[str]]:
        """Errors from the last validate() call keyed by field path."""
        if self._errors:
            return {self.name: list(self._errors)}
        return {}

    # ==================== WIDGETS ====================

    def get_registry(self) -> "MuttRegistry":
        if self.registry is not None:
            return self.registry
        from mutt_forms.registry import get_registry
        return get_registry()

    def get_widget(self) -> Callable[..., Widget]:
        """Resolve the widget class/factory used to render this field."""
        if self.widget is None:
            return self.default_widget

        if not isinstance(self.widget, str):
            return self.widget

        registry = self.get_registry()
        if registry.has_widget(self.widget):
            return registry.get_widget(self.widget)

        logger.warning(
            f"Widget '{self.widget}' for field '{self.name}' is not registered, "
            f"using {getattr(self.default_widget, '__name__', self.default_widget)}"
        )
        return self.default_widget

    def get_widget_instance(self) -> Widget:
        return self.get_widget()(self, self.attribs)

    def get_children(self) -> List["Field"]:
        """Child fields rendered inside this one (containers only)."""
        return []

    def render(self, parent: Optional[QWidget] = None) -> QWidget:
        """
        Render this field to a Qt node.

        Edits made in the node flow back into ``value`` when the node emits
        change signals (see FormConfig.connect_change_signals).
        """
        node = self.get_widget_instance().render(parent)
        self._bind(node)
        return node

    def render_into(self, layout: QFormLayout, parent: Optional[QWidget] = None) -> QWidget:
        """Render this field and add it as a row of ``layout``."""
        widget = self.get_widget_instance()
        node = widget.render(parent)
        self._bind(node)
        if widget.labelled:
            layout.addRow(node)
        else:
            layout.addRow(widget.get_label(), node)
        return node

    def _bind(self, node: QWidget) -> None:
        if get_form_config().connect_change_signals and isinstance(node, ChangeSignalEmitter):
            node.connect_change_signal(self._on_node_changed)

    def _on_node_changed(self, value: Any) -> None:
        self._value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, value={self.value!r})"


def field_from_schema(name: str, schema: Mapping[str, Any], registry: "MuttRegistry",
                      required: bool = False) -> Field:
    """
    Build a field for one schema entry, resolving its type through ``registry``.

    Registered factories that are not Field subclasses are called with the
    translated constructor kwargs instead of from_schema().

    Raises:
        UnknownFieldTypeError: If the schema type is not registered
    """
    type_name = schema.get("type", "string")
    factory = registry.get_field(type_name)
    if factory is None:
        raise UnknownFieldTypeError(
            f"No field registered for type '{type_name}' (field '{name}')"
        )

    if isinstance(factory, type) and issubclass(factory, Field):
        return factory.from_schema(name, schema, required=required, registry=registry)

    return factory(name, required=required, registry=registry,
                   **Field.kwargs_from_schema(schema))
