"""
Registry of fields, widgets, settings and form extensions.

The registry is the composition root of mutt-forms: forms resolve schema type
names to field factories through it, fields resolve widget names through it,
and plugins extend it through use().

Design:
- Explicit object: create as many independent registries as needed
  (tests, embedding several form stacks in one process)
- Last-write-wins registration, no merging at the class level
- Lookup misses return None; only use() raises
- Every registry guards its maps with one RLock

Example:
    registry = MuttRegistry()
    registry.register_widget("textarea", TextAreaWidget)
    registry.use(MyPlugin())
    form = MuttForm.from_schema(schema, registry=registry)
"""

from typing import Any, Callable, Dict, Mapping, Optional
import inspect
import logging
import threading

from mutt_forms.fields import (
    ArrayField,
    BooleanField,
    ButtonField,
    ChoiceField,
    IntegerField,
    ObjectField,
    StringField,
)
from mutt_forms.protocols.plugin_protocol import (
    PluginFeatures,
    decode_plugin_features,
    resolve_install,
)

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS: Dict[str, Any] = {
    "debug": False,
}

DEFAULT_FIELDS: Dict[str, Callable] = {
    "array": ArrayField,
    "boolean": BooleanField,
    "enum": ChoiceField,
    "integer": IntegerField,
    "object": ObjectField,
    "string": StringField,
    "date": StringField,
    "datetime": StringField,
    "button": ButtonField,
}


def _install_accepts_context(install: Callable) -> bool:
    """
    True if install() has a required positional parameter for the registry.

    Optional parameters (``def install(self, options=None)``) and ``*args``
    are left alone; such plugins get the no-argument call.
    """
    try:
        signature = inspect.signature(install)
    except (TypeError, ValueError):
        # Builtins without signature metadata get the legacy call
        return False
    return any(
        param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
        and param.default is param.empty
        for param in signature.parameters.values()
    )


class MuttRegistry:
    """
    Catalog of field types, widgets, settings and form extensions.

    A fresh registry holds the default settings ({"debug": False}), the nine
    default field bindings, no widgets and no extensions.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._settings: Dict[str, Any] = dict(DEFAULT_SETTINGS)
        self._fields: Dict[str, Callable] = dict(DEFAULT_FIELDS)
        self._widgets: Dict[str, Callable] = {}
        self._extensions: Dict[str, Callable] = {}

    # ==================== SETTINGS ====================

    def get_setting(self, name: str) -> Any:
        """
        Get a setting by name.

        Returns:
            The stored value (falsy values included), or None if never set
        """
        with self._lock:
            if name not in self._settings:
                return None
            return self._settings[name]

    def set_setting(self, name: str, value: Any) -> None:
        with self._lock:
            self._settings[name] = value

    def get_settings(self) -> Dict[str, Any]:
        """Live settings mapping."""
        return self._settings

    # ==================== FIELDS ====================

    def register_field(self, type_name: str, field_factory: Callable) -> None:
        """
        Register a field type, replacing any existing binding.

        Args:
            type_name: Schema type name (e.g. "string")
            field_factory: Field class, or any callable building a Field
        """
        with self._lock:
            if type_name in self._fields:
                logger.debug(f"Replacing field type '{type_name}' with {field_factory!r}")
            self._fields[type_name] = field_factory

    def register_fields(self, fields: Optional[Mapping[str, Callable]]) -> None:
        """Register many field types; None is a no-op."""
        if not fields:
            return
        with self._lock:
            for type_name, field_factory in fields.items():
                self.register_field(type_name, field_factory)

    def has_field(self, type_name: str) -> bool:
        with self._lock:
            return type_name in self._fields

    def get_field(self, type_name: str) -> Optional[Callable]:
        """Get the field factory for a type, or None."""
        with self._lock:
            return self._fields.get(type_name)

    def get_fields(self) -> Dict[str, Callable]:
        """Live field mapping."""
        return self._fields

    # ==================== WIDGETS ====================

    def register_widget(self, name: str, widget_factory: Callable) -> None:
        """
        Register a widget by name, replacing any existing binding.

        Args:
            name: Widget name fields refer to (e.g. "textarea")
            widget_factory: Widget class, or any callable building a Widget
        """
        with self._lock:
            if name in self._widgets:
                logger.debug(f"Replacing widget '{name}' with {widget_factory!r}")
            self._widgets[name] = widget_factory

    def register_widgets(self, widgets: Optional[Mapping[str, Callable]]) -> None:
        """Register many widgets; None is a no-op."""
        if not widgets:
            return
        with self._lock:
            for name, widget_factory in widgets.items():
                self.register_widget(name, widget_factory)

    def has_widget(self, name: str) -> bool:
        with self._lock:
            return name in self._widgets

    def get_widget(self, name: str) -> Optional[Callable]:
        """Get a widget factory by name, or None."""
        with self._lock:
            return self._widgets.get(name)

    def get_widgets(self) -> Dict[str, Callable]:
        """
        Live widget mapping.

        Not a copy: later registrations show up in the returned dict.
        """
        return self._widgets

    # ==================== EXTENSIONS ====================

    def has_extension(self, name: str) -> bool:
        with self._lock:
            return name in self._extensions

    def get_extension(self, name: str) -> Optional[Callable]:
        with self._lock:
            return self._extensions.get(name)

    def get_extensions(self) -> Dict[str, Callable]:
        """Snapshot of the installed extensions, taken by each new form."""
        with self._lock:
            return dict(self._extensions)

    # ==================== PLUGINS ====================

    def use(self, plugin: Any) -> "MuttRegistry":
        """
        Install a plugin.

        The plugin's install() is called (with this registry if it has a
        required positional parameter), its result decoded into
        PluginFeatures, and everything is merged in one step: fields and
        widgets are registered, settings are shallow-merged over existing
        ones, and extensions become methods on every MuttForm built from now
        on.

        Nothing is merged if install() raises or returns malformed features.

        Args:
            plugin: Object exposing install()

        Returns:
            This registry, so calls can be chained

        Raises:
            InvalidPluginError: If the plugin has no install, its features are
                malformed, or an extension name is reserved by MuttForm
        """
        install = resolve_install(plugin)

        if _install_accepts_context(install):
            raw_features = install(self)
        else:
            raw_features = install()

        from mutt_forms.forms.form import MuttForm
        features = decode_plugin_features(
            raw_features, reserved_names=MuttForm.reserved_extension_names()
        )
        self._merge(features)

        logger.debug(
            f"Installed plugin {type(plugin).__name__}: "
            f"{len(features.fields)} fields, {len(features.widgets)} widgets, "
            f"{len(features.settings)} settings, {len(features.extensions)} extensions"
        )
        return self

    def _merge(self, features: PluginFeatures) -> None:
        with self._lock:
            self.register_fields(features.fields)
            self.register_widgets(features.widgets)
            self._settings.update(features.settings)

            for name, extension in features.extensions.items():
                if name in self._extensions:
                    logger.warning(f"Extension '{name}' already installed. Overwriting.")
                self._extensions[name] = extension


# Default registry instance (created on first use)
_registry: Optional[MuttRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> MuttRegistry:
    """Get the default registry, creating it on first use."""
    global _registry
    with _registry_lock:
        if _registry is None:
            _registry = MuttRegistry()
        return _registry


def set_registry(registry: MuttRegistry) -> None:
    """Replace the default registry.

    Args:
        registry: MuttRegistry instance
    """
    global _registry
    with _registry_lock:
        _registry = registry


def reset_registry() -> None:
    """Forget the default registry; the next get_registry() builds a fresh one."""
    global _registry
    with _registry_lock:
        _registry = None
