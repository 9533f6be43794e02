"""
Capability ABCs for rendered widget nodes.

A Widget renders a Field into a Qt node. Fields talk to that node only
through these contracts, so a field never has to know whether it is looking
at a line edit, a spin box or a third-party widget from a plugin.

Nodes compose capabilities by multiple inheritance.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Tuple


class ValueGettable(ABC):
    """
    ABC for nodes that can report the value the user entered.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the node.

        Returns:
            The node's current value. None if nothing was entered.
        """
        pass


class ValueSettable(ABC):
    """
    ABC for nodes that can display a field value.
    """

    @abstractmethod
    def set_value(self, value: Any) -> None:
        """
        Set the node's value.

        Args:
            value: The value to show. None clears the node.
        """
        pass


class PlaceholderCapable(ABC):
    """ABC for nodes that can show placeholder text while empty."""

    @abstractmethod
    def set_placeholder(self, text: str) -> None:
        pass


class RangeConfigurable(ABC):
    """
    ABC for numeric nodes with a configurable range.
    """

    @abstractmethod
    def configure_range(self, minimum: float, maximum: float) -> None:
        """
        Configure the valid range for numeric input.

        Args:
            minimum: Minimum allowed value
            maximum: Maximum allowed value
        """
        pass


class ChoiceSelectable(ABC):
    """
    ABC for nodes that pick one value out of a fixed set of choices.
    """

    @abstractmethod
    def set_choices(self, choices: Iterable[Tuple[Any, str]]) -> None:
        """
        Replace the available choices.

        Args:
            choices: (value, label) pairs in display order
        """
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for nodes that report edits.

    Hides the differences between Qt signal names (textChanged vs
    valueChanged vs currentIndexChanged) behind one contract.
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to the node's change signal.

        Args:
            callback: Called with the new value whenever the node changes.
        """
        pass

    @abstractmethod
    def disconnect_change_signal(self) -> None:
        """Disconnect every callback connected through connect_change_signal."""
        pass
