"""Services package."""

from .extensions import ExtensionLoadedCondition, ExtensionLookup, lookup_from_keys

__all__ = ["ExtensionLoadedCondition", "ExtensionLookup", "lookup_from_keys"]
