"""Numeric input widgets."""

from typing import Optional

from PyQt6.QtWidgets import QWidget

from mutt_forms.protocols.widget_adapters import SpinBoxAdapter
from .core import Widget


class IntegerInput(Widget):
    """
    Integer spin box.

    Honors ``minimum``/``maximum`` field options. An empty spin box reads
    back as None so that RequiredValidator still applies.
    """

    kind = "integer"

    def render_field(self, parent: Optional[QWidget] = None) -> QWidget:
        node = SpinBoxAdapter(parent)
        minimum = self.field.options.get("minimum")
        maximum = self.field.options.get("maximum")
        if minimum is not None or maximum is not None:
            node.configure_range(
                minimum if minimum is not None else -2147483647,
                maximum if maximum is not None else 2147483647,
            )
        return node
