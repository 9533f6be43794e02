"""Tests for widgets and rendering."""

import pytest
from PyQt6.QtWidgets import QCheckBox, QComboBox, QGroupBox, QLineEdit, QPushButton, QSpinBox

from mutt_forms.fields import (
    ArrayField, BooleanField, ButtonField, ChoiceField, IntegerField, ObjectField, StringField,
)
from mutt_forms.protocols import FormConfig, set_form_config
from mutt_forms.widgets import Button, TextInput, Widget


def test_button_render(qapp):
    """Buttons carry the button class name and default properties."""
    field = ButtonField("submit", label="Send", attribs={"data-role": "primary"})
    widget = Button(field, field.attribs)

    assert widget.get_field_class() == "mutt-field mutt-field-button"

    node = widget.render()
    assert isinstance(node, QPushButton)
    assert node.text() == "Send"
    assert node.objectName() == "submit"
    assert node.property("class") == "mutt-field mutt-field-button"
    assert node.property("type") == "button"
    assert node.property("value") == "false"
    assert node.property("data-role") == "primary"


def test_attribs_override_defaults(qapp):
    """attribs are applied after the widget's own properties."""
    field = ButtonField("reset", attribs={"type": "reset"})
    node = field.render()
    assert node.property("type") == "reset"


def test_class_prefix_is_configurable(qapp):
    """FormConfig.class_prefix changes every class name."""
    set_form_config(FormConfig(class_prefix="acme"))
    assert Button(ButtonField("b")).get_field_class() == "acme acme-button"


def test_base_widget_class_name(qapp):
    """Widgets without a kind get the bare prefix."""

    class Bare(Widget):
        def render_field(self, parent=None):
            return QLineEdit(parent)

    assert Bare(StringField("x")).get_field_class() == "mutt-field"


def test_text_render_shows_value_and_options(qapp):
    """Text inputs show the value, placeholder, tooltip and max length."""
    field = StringField("name", initial="Ada", description="Your name",
                        placeholder="Full name", max_length=20)
    node = field.render()

    assert isinstance(node, QLineEdit)
    assert node.text() == "Ada"
    assert node.placeholderText() == "Full name"
    assert node.toolTip() == "Your name"
    assert node.maxLength() == 20
    assert node.property("class") == "mutt-field mutt-field-text"


def test_render_is_pure(qapp):
    """Rendering twice gives equivalent nodes and leaves the field alone."""
    field = StringField("name", initial="Ada")
    first, second = TextInput(field).render(), TextInput(field).render()
    assert first is not second
    assert first.text() == second.text() == "Ada"
    assert field.value == "Ada"


def test_edits_flow_back_into_field(qapp):
    """Typing in a rendered node updates the field value."""
    field = StringField("name")
    node = field.render()

    node.setText("Grace")
    assert field.value == "Grace"

    node.setText("   ")
    assert field.value is None


def test_change_signals_can_be_disabled(qapp):
    """connect_change_signals=False leaves field values alone."""
    set_form_config(FormConfig(connect_change_signals=False))
    field = StringField("name")
    field.render().setText("Grace")
    assert field.value is None


def test_integer_render(qapp):
    """Integer inputs honor range options and read empty as None."""
    field = IntegerField("age", initial=30, minimum=0, maximum=120)
    node = field.render()

    assert isinstance(node, QSpinBox)
    assert node.value() == 30
    assert node.maximum() == 120
    assert node.get_value() == 30

    node.set_value(None)
    assert node.get_value() is None
    assert field.value is None

    node.setValue(42)
    assert field.value == 42


def test_checkbox_render(qapp):
    """Checkboxes show the label and push bools into the field."""
    field = BooleanField("subscribe", label="Subscribe?", initial=True)
    node = field.render()

    assert isinstance(node, QCheckBox)
    assert node.text() == "Subscribe?"
    assert node.isChecked()

    node.setChecked(False)
    assert field.value is False


def test_select_render(qapp):
    """Selects list the choices and store real values."""
    field = ChoiceField("size", choices=[(1, "Small"), (2, "Large")], initial=2)
    node = field.render()

    assert isinstance(node, QComboBox)
    assert [node.itemText(i) for i in range(node.count())] == ["Small", "Large"]
    assert node.get_value() == 2

    node.setCurrentIndex(0)
    assert field.value == 1


def test_widget_name_from_registry(qapp, registry):
    """Registered widgets replace the default widget by name."""

    class Shouty(TextInput):
        kind = "shouty"

        def render_field(self, parent=None):
            node = super().render_field(parent)
            node.setProperty("shouting", True)
            return node

    registry.register_widget("shouty", Shouty)
    node = StringField("name", widget="shouty", registry=registry).render()
    assert node.property("class") == "mutt-field mutt-field-shouty"
    assert node.property("shouting") is True


def test_fieldset_renders_children(qapp, registry):
    """Container fields render their children inside a group box."""
    field = ObjectField("address", label="Address", registry=registry, properties={
        "street": StringField("street", initial="High St"),
        "tags": ArrayField("tags", initial=["a", "b"], registry=registry),
    })
    node = field.render()

    assert isinstance(node, QGroupBox)
    assert node.title() == "Address"
    assert node.findChild(QLineEdit, "street").text() == "High St"
    assert node.findChild(QGroupBox, "tags") is not None
    assert len(node.findChildren(QLineEdit)) == 3

    node.findChild(QLineEdit, "street").setText("Low Rd")
    assert field.value["street"] == "Low Rd"


def test_adapters_name_their_change_signal():
    """Every adapter supplies the signal the change bridge connects to."""
    from mutt_forms.protocols.widget_adapters import (
        CheckBoxAdapter, ComboBoxAdapter, LineEditAdapter, SpinBoxAdapter, _SignalBridge,
    )

    assert "_bridge_signal" in _SignalBridge.__abstractmethods__
    for adapter in (LineEditAdapter, SpinBoxAdapter, ComboBoxAdapter, CheckBoxAdapter):
        assert not getattr(adapter, "__abstractmethods__", frozenset())
