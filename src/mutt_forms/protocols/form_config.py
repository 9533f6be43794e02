"""Global configuration for field and widget behavior.

Applications can install their own config to change the class-name prefix
used for styling hooks or to override validator messages (e.g. for i18n).
"""

from typing import Dict, Optional
from dataclasses import dataclass, field


@dataclass
class FormConfig:
    """Base configuration for mutt-forms.

    Attributes:
        class_prefix: Prefix for the CSS-like class names stamped on rendered nodes
        messages: Validator message overrides applied to every validator
        connect_change_signals: Whether rendered nodes push edits back into their field
    """

    class_prefix: str = "mutt-field"
    messages: Dict[str, str] = field(default_factory=dict)
    connect_change_signals: bool = True


# Global config instance (set by application)
_form_config: Optional[FormConfig] = None


def set_form_config(config: FormConfig) -> None:
    """Set the global form configuration.

    Args:
        config: FormConfig instance
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormConfig:
    """Get the current form configuration.

    Returns:
        Current FormConfig or default if not set
    """
    if _form_config is None:
        return FormConfig()
    return _form_config


def reset_form_config() -> None:
    """Drop any installed config so defaults apply again."""
    global _form_config
    _form_config = None
