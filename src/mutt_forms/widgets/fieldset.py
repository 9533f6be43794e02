"""Fieldset widget for container fields (objects and arrays)."""

from typing import Optional

from PyQt6.QtWidgets import QFormLayout, QGroupBox, QWidget

from .core import Widget


class Fieldset(Widget):
    """
    Group box holding the rendered child fields in a form layout.
    """

    kind = "fieldset"
    labelled = True

    def render_field(self, parent: Optional[QWidget] = None) -> QWidget:
        box = QGroupBox(self.get_label(), parent)
        layout = QFormLayout(box)
        for child in self.field.get_children():
            child.render_into(layout, box)
        return box
