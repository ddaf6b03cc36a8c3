"""Salted-challenge login handshake for the HomeStation web API."""

from dataclasses import dataclass
from typing import Any

import requests

from ..config import (
    LOGIN_BLOCKED_CODE,
    LOGIN_URL,
    MENU_URL,
    SEEK_SALT_PASSWORD,
    STATUS_OK,
)
from ..errors import (
    LoginBlocked,
    LoginRejected,
    MalformedResponse,
    MissingChallengeData,
    TransportError,
)
from ..logging_setup import log
from ..models import SaltChallenge
from ..network.client import RouterSession
from .password import derive_hash


@dataclass(frozen=True)
class LoginResponse:
    """
    Outcome of the credential-submit POST.

    Both fields are optional because the router's reply varies across
    firmware builds; a body that is not a JSON object leaves both unset.
    """

    error: str | None = None
    message: str | None = None

    @classmethod
    def from_body(cls, body: Any) -> "LoginResponse":
        if not isinstance(body, dict):
            return cls()
        return cls(
            error=_optional_str(body.get("error")),
            message=_optional_str(body.get("message")),
        )

    @property
    def ok(self) -> bool:
        return self.error == STATUS_OK

    @property
    def blocked(self) -> bool:
        return self.message is not None and LOGIN_BLOCKED_CODE in self.message


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def request_salt(transport: RouterSession, username: str) -> SaltChallenge:
    """
    POST the ``seeksalthash`` sentinel to obtain the salt pair.

    Raises:
        TransportError: the request failed
        MalformedResponse: the body is not a JSON object
        MissingChallengeData: ``salt`` or ``saltwebui`` is absent or empty
    """
    try:
        resp = transport.post_form(
            LOGIN_URL, {"username": username, "password": SEEK_SALT_PASSWORD}
        )
    except requests.RequestException as exc:
        raise TransportError(f"failed requesting salt: {exc}") from exc

    try:
        body = resp.json()
    except ValueError as exc:
        raise MalformedResponse(f"failed parsing salt response: {exc}") from exc
    if not isinstance(body, dict):
        raise MalformedResponse("failed parsing salt response: not a JSON object")

    salt = body.get("salt")
    saltwebui = body.get("saltwebui")
    if not salt or not isinstance(salt, str):
        raise MissingChallengeData("no salt returned from router")
    if not saltwebui or not isinstance(saltwebui, str):
        raise MissingChallengeData("no saltwebui returned from router")
    return SaltChallenge(salt=salt, saltwebui=saltwebui)


def submit_credentials(
    transport: RouterSession, username: str, password_hash: str
) -> LoginResponse:
    """POST the hashed password and return the router's verdict."""
    try:
        resp = transport.post_form(
            LOGIN_URL, {"username": username, "password": password_hash}
        )
    except requests.RequestException as exc:
        raise TransportError(f"failed posting hashed password: {exc}") from exc

    try:
        body = resp.json()
    except ValueError:
        # Treated like any other unrecognised reply: a rejected login.
        log.debug("Login response is not JSON (HTTP %s)", resp.status_code)
        body = None
    return LoginResponse.from_body(body)


def activate_session(transport: RouterSession) -> None:
    """
    Visit the session menu once so the router unlocks the other endpoints.

    This mimics the page reload the web UI performs after login.  The
    response is discarded and failures are ignored.
    """
    transport.fire_and_forget(transport.get, MENU_URL)


def login(transport: RouterSession, username: str, password: str) -> None:
    """
    Authenticate against the HomeStation admin API.

    Flow:
      POST /api/v1/session/login  username / password=seeksalthash → salt, saltwebui
      hash1 = PBKDF2(password, salt);  final = PBKDF2(hash1, saltwebui)
      POST /api/v1/session/login  username / password=final
      GET  /api/v1/session/menu   (only after the router answered error=ok)

    Returns None on success; every failure raises a ``RouterError``.
    """
    challenge = request_salt(transport, username)
    log.debug("Received salt challenge for user %r", username)

    final_hash = derive_hash(derive_hash(password, challenge.salt), challenge.saltwebui)
    result = submit_credentials(transport, username, final_hash)

    if result.ok:
        activate_session(transport)
        log.debug("Login successful. Active cookies: %s", list(transport.session.cookies.keys()))
        return

    if result.blocked:
        raise LoginBlocked(result.message)

    raise LoginRejected("login failed with provided credentials")
