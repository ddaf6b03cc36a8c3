"""Router client facade: login, fetch the host table, logout."""

from abc import ABC, abstractmethod

from .auth.login import login
from .config import LOGOUT_URL
from .hosts import fetch_devices
from .logging_setup import log
from .models import Device
from .network.client import RouterSession


class RouterClient(ABC):
    """Abstracts fetching the devices a router knows about."""

    @abstractmethod
    def list_connected(self) -> list[Device]:
        """Return the router's host table; raise ``RouterError`` on failure."""


class HomeStationClient(RouterClient):
    """
    Client for Vodafone HomeStation routers.

    Each instance owns one HTTP session (cookie jar).  ``list_connected``
    runs a full login → fetch → logout cycle; an instance must not run two
    cycles at the same time.  Use separate instances for parallel queries.
    """

    def __init__(self, router: str, username: str, password: str,
                 verify_ssl: bool = True):
        self.username = username
        self._password = password
        self.transport = RouterSession(router, verify_ssl=verify_ssl)

    @property
    def base_url(self) -> str:
        return self.transport.base

    def list_connected(self) -> list[Device]:
        # No session exists when login fails, so there is nothing to log out.
        login(self.transport, self.username, self._password)
        log.info("Logged in to %s as %s", self.base_url, self.username)
        try:
            return fetch_devices(self.transport)
        finally:
            self.logout()

    def logout(self) -> None:
        """End the router session; failures are ignored."""
        self.transport.fire_and_forget(self.transport.post_form, LOGOUT_URL, {})
        log.debug("Logged out of %s", self.base_url)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "HomeStationClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
