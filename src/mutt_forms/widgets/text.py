"""Text input widgets."""

from typing import Optional

from PyQt6.QtWidgets import QWidget

from mutt_forms.protocols.widget_adapters import LineEditAdapter
from .core import Widget


class TextInput(Widget):
    """Single line text input."""

    kind = "text"

    def render_field(self, parent: Optional[QWidget] = None) -> QWidget:
        node = LineEditAdapter(parent)
        placeholder = self.field.options.get("placeholder")
        if placeholder:
            node.set_placeholder(placeholder)
        max_length = self.field.options.get("max_length")
        if max_length:
            node.setMaxLength(int(max_length))
        return node
