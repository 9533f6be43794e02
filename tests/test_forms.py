"""Tests for MuttForm and plugin extensions."""

import logging
from types import SimpleNamespace

import pytest
from PyQt6.QtWidgets import QLineEdit, QPushButton, QWidget

from mutt_forms import ConfigurationError, MuttForm, UnknownFieldTypeError, get_registry
from mutt_forms.fields import IntegerField, StringField

SCHEMA = {
    "properties": {
        "name": {"type": "string", "title": "Name", "maxLength": 10},
        "age": {"type": "integer"},
        "submit": {"type": "button", "title": "Go"},
    },
    "required": ["name"],
}


def summary(form):
    return ", ".join(f"{k}={v}" for k, v in form.data().items())


def extension_plugin(**extensions):
    return SimpleNamespace(install=lambda: {"extensions": extensions})


def test_from_schema_builds_fields(registry):
    """Schema properties resolve through the registry in order."""
    form = MuttForm.from_schema(SCHEMA, registry=registry)

    assert list(form.fields) == ["name", "age", "submit"]
    assert isinstance(form.get_field("name"), StringField)
    assert form.get_field("name").required is True
    assert form.get_field("missing") is None


def test_from_schema_unknown_type(registry):
    """Unknown schema types raise UnknownFieldTypeError."""
    with pytest.raises(UnknownFieldTypeError):
        MuttForm.from_schema({"properties": {"loc": {"type": "geo"}}}, registry=registry)


def test_add_field(registry):
    """add_field resolves types through the registry."""
    form = MuttForm(registry=registry)
    field = form.add_field("age", "integer", initial=3)
    assert isinstance(field, IntegerField)
    assert form.fields["age"] is field

    with pytest.raises(UnknownFieldTypeError, match="geo"):
        form.add_field("where", "geo")

    # UnknownFieldTypeError is also a KeyError
    with pytest.raises(KeyError):
        form.add_field("where", "geo")


def test_data_validate_and_errors(registry):
    """validate() collects errors for every failing field."""
    form = MuttForm.from_schema(SCHEMA, registry=registry)

    assert form.validate() is False
    assert form.errors == {"name": ["This field is required."]}
    assert form.data() == {"name": None, "age": None}

    form.set_data({"name": "Ada", "age": "old", "ignored": 1})
    assert form.validate() is False
    assert form.errors == {"age": ["Value must be an integer"]}

    form.set_data({"age": 36})
    assert form.validate() is True
    assert form.errors == {}
    assert form.data() == {"name": "Ada", "age": 36}


def test_debug_setting_logs_failures(registry, caplog):
    """Validation failures are logged when the debug setting is on."""
    form = MuttForm.from_schema(SCHEMA, registry=registry)

    with caplog.at_level(logging.INFO, logger="mutt_forms"):
        form.validate()
        assert "Form validation failed" not in caplog.text

        registry.set_setting("debug", True)
        form.validate()
        assert "Form validation failed" in caplog.text


def test_render(qapp, registry):
    """render() lays out every field in one container."""
    form = MuttForm.from_schema(SCHEMA, registry=registry)
    node = form.render()

    assert isinstance(node, QWidget)
    assert node.findChild(QLineEdit, "name") is not None
    assert node.findChild(QPushButton, "submit").text() == "Go"

    node.findChild(QLineEdit, "name").setText("Ada")
    assert form.data()["name"] == "Ada"


def test_plugin_extensions_become_methods(registry):
    """Extensions installed by plugins are bound to new forms."""
    registry.use(extension_plugin(summary=summary))
    form = MuttForm(registry=registry)
    form.add_field("name", "string", initial="Ada")

    assert form.has_extension("summary")
    assert form.extension_names == ["summary"]
    assert form.summary() == "name=Ada"
    assert form.call_extension("summary") == "name=Ada"


def test_extensions_do_not_mutate_the_class(registry):
    """Extensions live on instances only."""
    registry.use(extension_plugin(summary=summary))
    MuttForm(registry=registry)

    assert not hasattr(MuttForm, "summary")
    assert not MuttForm(registry=get_registry()).has_extension("summary")


def test_extensions_apply_going_forward(registry):
    """Forms built before a plugin is installed keep their extension set."""
    before = MuttForm(registry=registry)
    registry.use(extension_plugin(summary=summary))
    after = MuttForm(registry=registry)

    assert not before.has_extension("summary")
    assert after.has_extension("summary")
    with pytest.raises(AttributeError, match="No extension 'summary'"):
        before.call_extension("summary")


def test_extensions_can_override_methods(registry):
    """An extension may replace a built-in method on new forms."""
    registry.use(extension_plugin(validate=lambda form: "custom"))
    assert MuttForm(registry=registry).validate() == "custom"


def test_later_extensions_win(registry, caplog):
    """Reinstalling an extension name replaces it with a warning."""
    registry.use(extension_plugin(greet=lambda form: "first"))
    registry.use(extension_plugin(greet=lambda form: "second"))

    assert MuttForm(registry=registry).greet() == "second"
    assert "already installed" in caplog.text


def test_instance_extensions(registry):
    """Extensions passed to the constructor apply to that form only."""
    registry.use(extension_plugin(greet=lambda form: "registry"))
    form = MuttForm(registry=registry, extensions={"greet": lambda form: "local"})

    assert form.greet() == "local"
    assert MuttForm(registry=registry).greet() == "registry"


@pytest.mark.parametrize("name", ["fields", "errors", "registry", "extension_names"])
def test_extensions_cannot_shadow_state(registry, name):
    """Constructor extensions named after form state or properties are rejected."""
    with pytest.raises(ConfigurationError, match=name):
        MuttForm(registry=registry, extensions={name: summary})


def test_default_registry_is_used():
    """Forms without an explicit registry use the default one."""
    get_registry().register_field("email", StringField)
    form = MuttForm()
    assert form.registry is get_registry()
    assert isinstance(form.add_field("contact", "email"), StringField)


def test_optional_bounded_fields_do_not_block_validation(registry):
    """Untouched optional fields with length bounds leave the form valid."""
    form = MuttForm.from_schema({
        "properties": {
            "nick": {"type": "string", "maxLength": 10},
            "tags": {"type": "array", "maxItems": 3},
        },
    }, registry=registry)

    assert form.validate() is True
    assert form.errors == {}
