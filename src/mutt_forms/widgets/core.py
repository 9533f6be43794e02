"""
Widget base class.

A Widget renders one Field into a Qt node. Rendering is a pure function of
the field's current value and attributes: calling render() twice produces two
equivalent nodes and leaves the field untouched.

Every rendered node is stamped with:
- objectName: the field name
- dynamic property "class": a CSS-like class name for stylesheet hooks
  (e.g. ``QPushButton[class~="mutt-field-button"]``)
- one dynamic property per entry in ``attribs``
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, TYPE_CHECKING
import logging

from PyQt6.QtWidgets import QWidget

from mutt_forms.protocols.form_config import get_form_config
from mutt_forms.protocols.widget_protocols import ValueGettable, ValueSettable

if TYPE_CHECKING:
    from mutt_forms.fields.core import Field

logger = logging.getLogger(__name__)


class Widget(ABC):
    """
    Base class for all widgets.

    Subclasses set ``kind`` (used in the class name) and implement
    render_field().

    Args:
        field: The field being rendered
        attribs: Extra attributes set as dynamic properties on the node
    """

    kind: str = ""
    # True when the node shows the field label itself (checkboxes, buttons)
    labelled: bool = False

    def __init__(self, field: "Field", attribs: Optional[Dict[str, Any]] = None):
        self.field = field
        self.attribs: Dict[str, Any] = dict(attribs or {})

    @abstractmethod
    def render_field(self, parent: Optional[QWidget] = None) -> QWidget:
        """Build the bare node for this widget."""
        pass

    def render(self, parent: Optional[QWidget] = None) -> QWidget:
        """
        Render the field.

        Args:
            parent: Optional Qt parent for the node

        Returns:
            The rendered node
        """
        node = self.render_field(parent)
        node.setObjectName(self.field.name)
        node.setProperty("class", self.get_field_class())

        for attrib, value in self.attribs.items():
            node.setProperty(attrib, value)

        if self.field.description:
            node.setToolTip(self.field.description)

        if isinstance(node, ValueSettable):
            node.set_value(self.field.value)

        logger.debug(f"Rendered {self.field.name!r} with {type(self).__name__}")
        return node

    def get_field_class(self) -> str:
        """Get the class name stamped on the rendered node."""
        prefix = get_form_config().class_prefix
        if not self.kind:
            return prefix
        return f"{prefix} {prefix}-{self.kind}"

    def get_label(self) -> str:
        return self.field.label

    @staticmethod
    def read_value(node: QWidget) -> Any:
        """Read the value out of a rendered node, or None if it holds none."""
        if isinstance(node, ValueGettable):
            return node.get_value()
        return None
