"""Exception hierarchy shared by the tree model, the store and the CLI."""

from __future__ import annotations


class PuhaError(Exception):
    """Base class for every failure the CLI reports to the user."""


class ConfigError(PuhaError):
    """puha.toml or a PUHA_* environment variable could not be used."""


class SpaceNotFoundError(PuhaError):
    """A space name did not resolve.

    ``role`` says which lookup failed: "space", "source space",
    "destination space", "parent space" or "child space". ``within`` names
    the space a direct-children lookup was confined to.
    """

    def __init__(self, name: str, role: str = "space", within: str | None = None) -> None:
        self.name = name
        self.role = role
        self.within = within
        message = f"{role} '{name}' not found"
        if within is not None:
            message += f" under '{within}'"
        super().__init__(message)


class ItemNotFoundError(PuhaError):
    def __init__(self, name: str, space: str) -> None:
        self.name = name
        self.space = space
        super().__init__(f"item '{name}' not found in space '{space}'")


class StoreError(PuhaError):
    """Base class for document persistence failures."""


class StoreIOError(StoreError):
    """The document could not be read or written."""


class DocumentFormatError(StoreError):
    """The document does not parse into, or cannot be written as, the space tree shape."""
