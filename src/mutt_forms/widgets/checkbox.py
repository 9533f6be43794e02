"""Checkbox widget."""

from typing import Optional

from PyQt6.QtWidgets import QWidget

from mutt_forms.protocols.widget_adapters import CheckBoxAdapter
from .core import Widget


class CheckboxInput(Widget):
    """Checkbox for boolean fields; the field label is shown beside the box."""

    kind = "checkbox"
    labelled = True

    def render_field(self, parent: Optional[QWidget] = None) -> QWidget:
        node = CheckBoxAdapter(parent)
        node.setText(self.get_label())
        return node
