"""Checks whether a named extension is active in the host environment."""

from typing import Callable, Iterable

from newsdesk.core.logging import get_logger

logger = get_logger(__name__)

ExtensionLookup = Callable[[str], bool]


def lookup_from_keys(loaded_keys: Iterable[str]) -> ExtensionLookup:
    """Build a case-insensitive lookup over a fixed set of extension keys."""
    keys = frozenset(key.strip().lower() for key in loaded_keys if key.strip())

    def is_loaded(extension_key: str) -> bool:
        return extension_key.strip().lower() in keys

    return is_loaded


class ExtensionLoadedCondition:
    """Condition that holds when the given extension is loaded."""

    def __init__(self, lookup: ExtensionLookup):
        self.lookup = lookup

    def verdict(self, extension_key: str) -> bool:
        if not extension_key or not extension_key.strip():
            raise ValueError("Extension key must not be empty")

        loaded = bool(self.lookup(extension_key))
        logger.debug(f"Extension {extension_key} loaded: {loaded}")
        return loaded
