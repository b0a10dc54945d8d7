"""Selector configuration.

This package provides:
- SelectorSettings: user-configurable selection defaults loaded from YAML
"""

from camres.settings.user import SelectorSettings

__all__ = ["SelectorSettings"]
