"""
Protocol definitions: widget capability ABCs and Qt adapters, the plugin
protocol, and global form configuration.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    PlaceholderCapable,
    RangeConfigurable,
    ChoiceSelectable,
    ChangeSignalEmitter,
)
from .widget_adapters import (
    LineEditAdapter,
    SpinBoxAdapter,
    ComboBoxAdapter,
    CheckBoxAdapter,
    PyQtWidgetMeta,
)
from .plugin_protocol import PluginProtocol, PluginFeatures, decode_plugin_features
from .form_config import FormConfig, set_form_config, get_form_config, reset_form_config

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "PlaceholderCapable",
    "RangeConfigurable",
    "ChoiceSelectable",
    "ChangeSignalEmitter",
    "LineEditAdapter",
    "SpinBoxAdapter",
    "ComboBoxAdapter",
    "CheckBoxAdapter",
    "PyQtWidgetMeta",
    "PluginProtocol",
    "PluginFeatures",
    "decode_plugin_features",
    "FormConfig",
    "set_form_config",
    "get_form_config",
    "reset_form_config",
]
