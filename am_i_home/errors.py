"""Exception hierarchy for router communication failures.

Every failure is terminal for the current ``list_connected`` call; nothing
is retried.  Messages name the step that failed.
"""


class RouterError(Exception):
    """Base class for all errors raised while talking to the router."""


class TransportError(RouterError):
    """Network failure or timeout on an HTTP request."""


class MalformedResponse(RouterError):
    """Response body is not valid JSON or lacks the expected shape."""


class LoginError(RouterError):
    """Base class for the failed outcomes of the login handshake."""


class MissingChallengeData(LoginError):
    """The salt challenge came back without ``salt`` or ``saltwebui``."""


class LoginRejected(LoginError):
    """The router did not accept the submitted credentials."""


class LoginBlocked(LoginError):
    """Another session is open on the router (``MSG_LOGIN_150``)."""

    def __init__(self, router_message: str):
        super().__init__(f"An active session exists. Logout first. {router_message}")
        self.router_message = router_message


class CatalogError(RouterError):
    """The host table envelope reported a status other than ``ok``."""

    def __init__(self, status: str):
        super().__init__(f"host table returned error: {status}")
        self.status = status
