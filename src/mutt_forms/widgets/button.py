"""
Button widget.
"""

from typing import Optional

from PyQt6.QtWidgets import QPushButton, QWidget

from .core import Widget


class Button(Widget):
    """
    Standard push button.

    Carries ``type="button"`` and ``value="false"`` properties; both can be
    overridden through attribs.
    """

    kind = "button"
    labelled = True

    def render_field(self, parent: Optional[QWidget] = None) -> QWidget:
        button = QPushButton(self.get_label(), parent)
        button.setProperty("type", "button")
        button.setProperty("value", "false")
        return button
