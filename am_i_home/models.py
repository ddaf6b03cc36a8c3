"""Data records exchanged with the router."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Device:
    """One entry of the router's host table at fetch time."""

    mac: str
    ip: str
    hostname: str
    active: bool


@dataclass(frozen=True)
class SaltChallenge:
    """Salt pair issued by the router for a single login attempt."""

    salt: str = field(repr=False)
    saltwebui: str = field(repr=False)
