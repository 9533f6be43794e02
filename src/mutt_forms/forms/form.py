"""
MuttForm - binds fields built from a registry into one form.

Plugin extensions are taken from the registry when the form is constructed
and bound to that instance as methods. Forms built before a plugin is
installed do not see its extensions; no class is ever mutated.
"""

from types import MethodType
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional
import inspect
import logging

from PyQt6.QtWidgets import QFormLayout, QWidget

from mutt_forms.exceptions import ConfigurationError, UnknownFieldTypeError
from mutt_forms.fields import Field, field_from_schema
from mutt_forms.registry import MuttRegistry, get_registry

logger = logging.getLogger(__name__)


class MuttForm:
    """
    A collection of named fields backed by a registry.

    Extensions may replace methods on an instance, but never its state or
    read-only attributes (see reserved_extension_names()).

    Args:
        registry: Registry used to resolve field types (default registry if None)
        extensions: Extra extensions for this instance only; they override
            registry extensions with the same name

    Raises:
        ConfigurationError: If an extension name is reserved
    """

    # Instance state set in __init__
    STATE_NAMES: FrozenSet[str] = frozenset(("registry", "fields", "errors", "_extensions"))

    def __init__(self, registry: Optional[MuttRegistry] = None,
                 extensions: Optional[Mapping[str, Callable]] = None):
        self.registry = registry if registry is not None else get_registry()
        self.fields: Dict[str, Field] = {}
        self.errors: Dict[str, List[str]] = {}

        self._extensions: Dict[str, Callable] = self.registry.get_extensions()
        self._extensions.update(extensions or {})

        reserved = self.reserved_extension_names()
        for name, extension in self._extensions.items():
            if name in reserved:
                raise ConfigurationError(f"Extension '{name}' would shadow form state")
            setattr(self, name, MethodType(extension, self))

    @classmethod
    def reserved_extension_names(cls) -> FrozenSet[str]:
        """
        Names an extension cannot take: instance state plus every class
        attribute that is a data descriptor (properties).
        """
        names = set(cls.STATE_NAMES)
        for klass in cls.__mro__:
            for name, attr in vars(klass).items():
                if inspect.isdatadescriptor(attr):
                    names.add(name)
        return frozenset(names)

    @classmethod
    def from_schema(cls, schema: Mapping[str, Any], registry: Optional[MuttRegistry] = None,
                    extensions: Optional[Mapping[str, Callable]] = None) -> "MuttForm":
        """
        Build a form from an object schema.

        Args:
            schema: ``{"properties": {name: {"type": ...}}, "required": [...]}``

        Raises:
            UnknownFieldTypeError: If a property uses an unregistered type
        """
        form = cls(registry=registry, extensions=extensions)
        required = set(schema.get("required") or [])
        for name, field_schema in (schema.get("properties") or {}).items():
            form.fields[name] = field_from_schema(
                name, field_schema, form.registry, required=name in required
            )
        return form

    # ==================== FIELDS ====================

    def add_field(self, name: str, type_name: str, **options: Any) -> Field:
        """
        Build a field of a registered type and add it to the form.

        Raises:
            UnknownFieldTypeError: If ``type_name`` is not registered
        """
        factory = self.registry.get_field(type_name)
        if factory is None:
            raise UnknownFieldTypeError(
                f"No field registered for type '{type_name}' (field '{name}')"
            )
        field = factory(name, registry=self.registry, **options)
        self.fields[name] = field
        return field

    def get_field(self, name: str) -> Optional[Field]:
        return self.fields.get(name)

    # ==================== DATA ====================

    def data(self) -> Dict[str, Any]:
        return {name: field.value for name, field in self.fields.items() if field.has_value}

    def set_data(self, data: Mapping[str, Any]) -> None:
        for name, value in data.items():
            if name in self.fields:
                self.fields[name].value = value

    def validate(self) -> bool:
        """Validate every field and collect errors by field path."""
        self.errors = {}
        valid = True
        for field in self.fields.values():
            if not field.validate():
                valid = False
            self.errors.update(field.collect_errors())

        if not valid and self.registry.get_setting("debug"):
            logger.info(f"Form validation failed: {self.errors}")
        return valid

    # ==================== RENDERING ====================

    def render(self, parent: Optional[QWidget] = None) -> QWidget:
        container = QWidget(parent)
        container.setProperty("class", "mutt-form")
        layout = QFormLayout(container)
        for field in self.fields.values():
            field.render_into(layout, container)
        return container

    # ==================== EXTENSIONS ====================

    @property
    def extension_names(self) -> List[str]:
        return list(self._extensions)

    def has_extension(self, name: str) -> bool:
        return name in self._extensions

    def call_extension(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Call an installed extension by name.

        Raises:
            AttributeError: If no extension with that name is installed
        """
        if name not in self._extensions:
            raise AttributeError(
                f"No extension '{name}' on this form. "
                f"Installed: {self.extension_names}"
            )
        return getattr(self, name)(*args, **kwargs)
