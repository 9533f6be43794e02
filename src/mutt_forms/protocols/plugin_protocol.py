"""Plugin protocol and plugin feature decoding.

A plugin is any object with an ``install`` callable. ``install`` returns the
plugin's features in one of two shapes:

- legacy triple: ``[fields, widgets, settings]`` (list or tuple)
- bundle: ``{"fields": ..., "widgets": ..., "settings": ..., "extensions": ...}``

Both shapes are decoded here, once, into :class:`PluginFeatures`. Nothing
downstream of :func:`decode_plugin_features` looks at the raw shape again.

Example:
    class DatePickerPlugin:
        def install(self):
            return {
                "fields": {"date": DateField},
                "widgets": {"datepicker": DatePickerWidget},
                "settings": {"date_format": "%Y-%m-%d"},
            }

    registry.use(DatePickerPlugin())
"""

from dataclasses import dataclass, field
from typing import (
    AbstractSet, Any, Callable, Dict, Mapping, Optional, Protocol, runtime_checkable,
)
import inspect
import logging

from mutt_forms.exceptions import InvalidPluginError

logger = logging.getLogger(__name__)

LEGACY_POSITIONS = ("fields", "widgets", "settings")
BUNDLE_KEYS = frozenset(("fields", "widgets", "settings", "extensions"))


@runtime_checkable
class PluginProtocol(Protocol):
    """Protocol for plugins accepted by MuttRegistry.use().

    ``install`` may take no arguments, or a single positional argument that
    receives the registry the plugin is being installed into.
    """

    def install(self, *args: Any) -> Any:
        ...


@dataclass(frozen=True)
class PluginFeatures:
    """Canonical form of everything a plugin contributes."""

    fields: Dict[str, Callable] = field(default_factory=dict)
    widgets: Dict[str, Callable] = field(default_factory=dict)
    settings: Dict[str, Any] = field(default_factory=dict)
    extensions: Dict[str, Callable] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not (self.fields or self.widgets or self.settings or self.extensions)


def _as_dict(member: str, value: Any) -> Dict[str, Any]:
    """Validate one plugin member and copy it into a plain dict."""
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise InvalidPluginError(
            f"Plugin '{member}' must be a mapping, got {type(value).__name__}"
        )
    for key in value:
        if not isinstance(key, str):
            raise InvalidPluginError(
                f"Plugin '{member}' keys must be strings, got {key!r}"
            )
    return dict(value)


def _check_extensions(extensions: Dict[str, Any], reserved: AbstractSet[str]) -> None:
    for name, extension in extensions.items():
        if not name.isidentifier() or name.startswith("_"):
            raise InvalidPluginError(
                f"Extension name {name!r} must be a public Python identifier"
            )
        if name in reserved:
            raise InvalidPluginError(
                f"Extension name '{name}' is reserved by the form"
            )
        if not callable(extension):
            raise InvalidPluginError(
                f"Extension '{name}' must be callable, got {type(extension).__name__}"
            )


def _from_legacy(features) -> Dict[str, Any]:
    if len(features) > len(LEGACY_POSITIONS):
        logger.warning(
            f"Legacy plugin returned {len(features)} items; "
            f"only the first {len(LEGACY_POSITIONS)} are used"
        )
    return dict(zip(LEGACY_POSITIONS, features))


def _from_bundle(features: Mapping) -> Dict[str, Any]:
    unknown = set(features) - BUNDLE_KEYS
    if unknown:
        logger.warning(f"Ignoring unknown plugin feature keys: {sorted(map(str, unknown))}")
    return {key: features[key] for key in BUNDLE_KEYS if key in features}


def decode_plugin_features(features: Any,
                           reserved_names: AbstractSet[str] = frozenset()) -> PluginFeatures:
    """
    Decode the value returned by a plugin's install() into PluginFeatures.

    Args:
        features: Legacy triple, bundle mapping, PluginFeatures or None
        reserved_names: Extension names the form host cannot take (its
            state and read-only attributes)

    Returns:
        Validated PluginFeatures, safe to merge without further checks

    Raises:
        InvalidPluginError: If the value has an unsupported shape or a
            member is malformed
    """
    if isinstance(features, PluginFeatures):
        raw = {
            "fields": features.fields,
            "widgets": features.widgets,
            "settings": features.settings,
            "extensions": features.extensions,
        }
    elif features is None:
        logger.debug("Plugin install() returned None; nothing to register")
        raw = {}
    elif isinstance(features, (list, tuple)):
        raw = _from_legacy(features)
    elif isinstance(features, Mapping):
        raw = _from_bundle(features)
    else:
        raise InvalidPluginError(
            f"Plugin install() must return a list, tuple or mapping, "
            f"got {type(features).__name__}"
        )

    decoded = {member: _as_dict(member, raw.get(member)) for member in BUNDLE_KEYS}
    _check_extensions(decoded["extensions"], reserved_names)
    return PluginFeatures(**decoded)


def resolve_install(plugin: Any) -> Callable:
    """
    Return the plugin's install callable.

    Raises:
        InvalidPluginError: If the plugin has no callable install, or is a
            class whose install is a plain instance method
    """
    install: Optional[Callable] = getattr(plugin, "install", None)
    if install is None or not callable(install):
        raise InvalidPluginError("Unable to install plugin - missing install!")
    if inspect.isclass(plugin) and inspect.isfunction(inspect.getattr_static(plugin, "install")):
        raise InvalidPluginError(
            f"Plugin {plugin.__name__} is a class; install an instance of it instead"
        )
    return install
