"""Form host that builds fields from a registry and carries plugin extensions."""

from .form import MuttForm

__all__ = ["MuttForm"]
