"""Exceptions raised by mutt-forms."""


class MuttFormsError(Exception):
    """Base class for all mutt-forms errors."""


class ConfigurationError(MuttFormsError):
    """Raised when the toolkit is wired together incorrectly."""


class InvalidPluginError(ConfigurationError):
    """Raised when a plugin cannot be installed into a registry."""


class UnknownFieldTypeError(ConfigurationError, KeyError):
    """Raised when a form asks for a field type that is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return Exception.__str__(self)
