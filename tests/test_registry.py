"""Tests for MuttRegistry."""

import threading

import pytest

from mutt_forms import MuttRegistry, get_registry, set_registry, reset_registry
from mutt_forms.fields import (
    ArrayField, BooleanField, ButtonField, ChoiceField,
    IntegerField, ObjectField, StringField,
)


def test_default_bootstrap(registry):
    """A fresh registry has the documented defaults and nothing else."""
    assert registry.get_settings() == {"debug": False}
    assert registry.get_fields() == {
        "array": ArrayField,
        "boolean": BooleanField,
        "enum": ChoiceField,
        "integer": IntegerField,
        "object": ObjectField,
        "string": StringField,
        "date": StringField,
        "datetime": StringField,
        "button": ButtonField,
    }
    assert registry.get_widgets() == {}
    assert registry.get_extensions() == {}


def test_registries_are_independent():
    """Mutating one registry leaves another untouched."""
    first, second = MuttRegistry(), MuttRegistry()
    first.register_widget("textarea", object)
    first.set_setting("debug", True)

    assert second.has_widget("textarea") is False
    assert second.get_setting("debug") is False


def test_missing_setting_is_none(registry):
    """Unknown settings read as None."""
    assert registry.get_setting("never_set") is None


@pytest.mark.parametrize("value", [False, 0, "", [], "on", 42])
def test_set_setting_roundtrip_keeps_falsy(registry, value):
    """Stored falsy values are returned as-is, not as 'missing'."""
    registry.set_setting("flag", value)
    assert registry.get_setting("flag") == value
    assert "flag" in registry.get_settings()


def test_debug_setting_defaults_to_false(registry):
    """debug is configured (False), not missing."""
    assert registry.get_setting("debug") is False


def test_register_field(registry):
    """register_field binds a type; re-registering replaces it."""

    class Custom(StringField):
        pass

    class Replacement(StringField):
        pass

    registry.register_field("custom", Custom)
    assert registry.has_field("custom")
    assert registry.get_field("custom") is Custom

    registry.register_field("custom", Replacement)
    assert registry.get_field("custom") is Replacement


def test_register_field_overrides_default(registry):
    """Defaults can be replaced like any other binding."""

    class Text(StringField):
        pass

    registry.register_field("string", Text)
    assert registry.get_field("string") is Text
    assert registry.get_field("date") is StringField


def test_register_fields_many_and_none(registry):
    """register_fields upserts a mapping and ignores None."""
    registry.register_fields(None)
    registry.register_fields({})
    assert len(registry.get_fields()) == 9

    registry.register_fields({"email": StringField, "age": IntegerField})
    assert registry.get_field("email") is StringField
    assert registry.get_field("age") is IntegerField


def test_unknown_field_lookup(registry):
    """Lookup misses return None / False."""
    assert registry.has_field("nope") is False
    assert registry.get_field("nope") is None


def test_register_widgets(registry):
    """Widget registration mirrors field registration."""
    registry.register_widgets(None)
    assert registry.get_widgets() == {}

    registry.register_widget("first", int)
    registry.register_widgets({"second": str, "first": float})

    assert registry.has_widget("second")
    assert registry.get_widget("first") is float
    assert registry.get_widget("missing") is None
    assert registry.has_widget("missing") is False


def test_get_widgets_is_live(registry):
    """get_widgets returns the live mapping, not a copy."""
    widgets = registry.get_widgets()
    registry.register_widget("later", object)
    assert widgets["later"] is object


def test_factories_need_not_be_classes(registry):
    """Any callable can be registered as a field factory."""

    def make_email(name, **options):
        return StringField(name, placeholder="you@example.com", **options)

    registry.register_field("email", make_email)
    field = registry.get_field("email")("contact")
    assert isinstance(field, StringField)
    assert field.options["placeholder"] == "you@example.com"


def test_default_registry_lifecycle():
    """get/set/reset manage the process-wide default registry."""
    default = get_registry()
    assert get_registry() is default

    custom = MuttRegistry()
    set_registry(custom)
    assert get_registry() is custom

    reset_registry()
    assert get_registry() is not custom


def test_concurrent_registration(registry):
    """Concurrent writers do not lose registrations."""

    def register(offset):
        for i in range(200):
            registry.register_widget(f"w{offset}-{i}", object)
            registry.set_setting(f"s{offset}-{i}", i)

    threads = [threading.Thread(target=register, args=(n,)) for n in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(registry.get_widgets()) == 800
    assert registry.get_setting("s3-199") == 199
