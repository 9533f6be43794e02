"""pytest configuration and fixtures for mutt-forms tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from mutt_forms import MuttRegistry, reset_registry
from mutt_forms.protocols import reset_form_config


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture
def registry():
    """A fresh, isolated registry."""
    return MuttRegistry()


@pytest.fixture(autouse=True)
def _reset_globals():
    """Keep the default registry and form config from leaking between tests."""
    yield
    reset_registry()
    reset_form_config()
