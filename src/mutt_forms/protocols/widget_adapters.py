"""
Qt node adapters implementing the widget capability ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QSpinBox.value() vs QComboBox.currentData()
- QLineEdit.setText() vs QSpinBox.setValue() vs QComboBox.setCurrentIndex()
- textChanged vs valueChanged vs currentIndexChanged vs stateChanged

Widgets build their nodes from these adapters; fields then read and write
values through get_value()/set_value() only.
"""

from typing import Any, Callable, Iterable, Tuple
from abc import ABC, ABCMeta, abstractmethod

from PyQt6.QtWidgets import QLineEdit, QSpinBox, QComboBox, QCheckBox
from PyQt6.QtCore import QObject

from .widget_protocols import (
    ValueGettable, ValueSettable, PlaceholderCapable,
    RangeConfigurable, ChoiceSelectable, ChangeSignalEmitter
)


# Combine Qt's metaclass with ABCMeta so adapters can inherit from both
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class _SignalBridge(ABC):
    """Keeps track of slots so they can be disconnected again."""

    @abstractmethod
    def _bridge_signal(self):
        """Qt signal emitted when the node value changes."""

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        slot = lambda *_: callback(self.get_value())
        self._slots = getattr(self, "_slots", [])
        self._slots.append(slot)
        self._bridge_signal().connect(slot)

    def disconnect_change_signal(self) -> None:
        for slot in getattr(self, "_slots", []):
            try:
                self._bridge_signal().disconnect(slot)
            except TypeError:
                # Signal not connected - ignore
                pass
        self._slots = []


class LineEditAdapter(_SignalBridge, QLineEdit, ValueGettable, ValueSettable,
                      PlaceholderCapable, ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit.

    Empty (or whitespace-only) text reads back as None.
    """

    def _bridge_signal(self):
        return self.textChanged

    def get_value(self) -> Any:
        text = self.text().strip()
        return None if text == "" else text

    def set_value(self, value: Any) -> None:
        self.setText("" if value is None else str(value))

    def set_placeholder(self, text: str) -> None:
        self.setPlaceholderText(text)


class SpinBoxAdapter(_SignalBridge, QSpinBox, ValueGettable, ValueSettable,
                     PlaceholderCapable, RangeConfigurable, ChangeSignalEmitter,
                     metaclass=PyQtWidgetMeta):
    """
    Adapter for QSpinBox.

    Handles None values using the special value text mechanism: the minimum
    value displays as blank and reads back as None.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setSpecialValueText(" ")  # Empty special value = None
        self.setRange(-2147483648, 2147483647)  # Default int range

    def _bridge_signal(self):
        return self.valueChanged

    def get_value(self) -> Any:
        if self.value() == self.minimum() and self.specialValueText():
            return None
        return self.value()

    def set_value(self, value: Any) -> None:
        try:
            self.setValue(int(value))
        except (TypeError, ValueError):
            # None, "" and unparseable text all show as empty
            self.setValue(self.minimum())

    def set_placeholder(self, text: str) -> None:
        # Shown when at minimum with special value text
        self.setSpecialValueText(text)

    def configure_range(self, minimum: float, maximum: float) -> None:
        # One slot below the minimum is reserved for the None state
        self.setRange(int(minimum) - 1, int(maximum))


class ComboBoxAdapter(_SignalBridge, QComboBox, ValueGettable, ValueSettable,
                      PlaceholderCapable, ChoiceSelectable, ChangeSignalEmitter,
                      metaclass=PyQtWidgetMeta):
    """
    Adapter for QComboBox.

    Stores actual values in itemData, not just display text.
    """

    def _bridge_signal(self):
        return self.currentIndexChanged

    def get_value(self) -> Any:
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        for i in range(self.count()):
            if self.itemData(i) == value:
                self.setCurrentIndex(i)
                return
        # Value not found - clear selection
        self.setCurrentIndex(-1)

    def set_placeholder(self, text: str) -> None:
        self.setPlaceholderText(text)

    def set_choices(self, choices: Iterable[Tuple[Any, str]]) -> None:
        self.clear()
        for value, label in choices:
            self.addItem(label, value)
        self.setCurrentIndex(-1)


class CheckBoxAdapter(_SignalBridge, QCheckBox, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, metaclass=PyQtWidgetMeta):
    """
    Adapter for QCheckBox.

    Returns bool values, treats None as False.
    """

    def _bridge_signal(self):
        return self.stateChanged

    def get_value(self) -> Any:
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        self.setChecked(bool(value) if value is not None else False)
