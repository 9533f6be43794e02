"""Select (drop-down) widget."""

from typing import Optional

from PyQt6.QtWidgets import QWidget

from mutt_forms.protocols.widget_adapters import ComboBoxAdapter
from .core import Widget


class Select(Widget):
    """Drop-down populated from the field's choices."""

    kind = "select"

    def render_field(self, parent: Optional[QWidget] = None) -> QWidget:
        node = ComboBoxAdapter(parent)
        node.set_choices(self.field.get_choices())
        placeholder = self.field.options.get("placeholder")
        if placeholder:
            node.set_placeholder(placeholder)
        return node
