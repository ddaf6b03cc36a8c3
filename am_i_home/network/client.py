"""
HTTP transport for router communication.

One ``requests.Session`` holds the cookie jar and the browser-like headers
the HomeStation web UI sends.  Requests are never retried and every call
is bounded by ``REQUEST_TIMEOUT`` from the first byte sent to the last
byte read.
"""

from time import monotonic
from typing import Any, Callable, Mapping

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ..config import BODY_CHUNK_SIZE, FORM_CONTENT_TYPE, REQUEST_TIMEOUT, USER_AGENT
from ..logging_setup import log


def base_url(router: str) -> str:
    """
    Build the base URL for the router.

    Args:
        router: Router URL (``http://192.168.0.1``) or bare host/IP

    Returns:
        Base URL without trailing slashes (e.g., 'http://192.168.0.1')
    """
    router = router.strip()
    if "://" not in router:
        router = f"http://{router}"
    return router.rstrip("/")


def build_session(base: str, verify_ssl: bool = True) -> requests.Session:
    """
    Return a requests.Session carrying the headers of the router's web UI.

    Args:
        base: Router base URL, used as the Referer
        verify_ssl: Whether to verify SSL certificates

    Returns:
        Configured requests.Session instance
    """
    session = requests.Session()
    # A transient failure aborts the whole operation; no retries at this layer.
    adapter = HTTPAdapter(max_retries=Retry(total=0, read=False))
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    session.verify = verify_ssl
    session.headers.update({
        "Accept": "*/*",
        "User-Agent": USER_AGENT,
        "Referer": base + "/",
        "X-Requested-With": "XMLHttpRequest",
    })
    return session


def _read_body(resp: requests.Response, deadline: float) -> requests.Response:
    """
    Read a streamed response body, giving up once *deadline* has passed.

    ``timeout=`` in requests only bounds the connect and each single read,
    so a router trickling bytes could otherwise hold a call open forever.

    Raises:
        requests.Timeout: the whole request took longer than REQUEST_TIMEOUT
    """
    chunks = []
    with resp:
        for chunk in resp.iter_content(chunk_size=BODY_CHUNK_SIZE):
            if monotonic() > deadline:
                raise requests.Timeout(
                    f"no complete response from {resp.url} within {REQUEST_TIMEOUT}s"
                )
            chunks.append(chunk)
    resp._content = b"".join(chunks)
    return resp


class RouterSession:
    """
    Transport owned by a single router client.

    Wraps one ``requests.Session`` so all calls share its cookie state.
    ``get`` and ``post_form`` let ``requests.RequestException`` propagate;
    ``fire_and_forget`` is the one place where failures are discarded.
    """

    def __init__(self, router: str, verify_ssl: bool = True):
        self.base = base_url(router)
        self.session = build_session(self.base, verify_ssl=verify_ssl)

    def url(self, path: str) -> str:
        return self.base + path

    def get(self, path: str) -> requests.Response:
        deadline = monotonic() + REQUEST_TIMEOUT
        resp = self.session.get(self.url(path), timeout=REQUEST_TIMEOUT, stream=True)
        return _read_body(resp, deadline)

    def post_form(self, path: str, form: Mapping[str, str]) -> requests.Response:
        deadline = monotonic() + REQUEST_TIMEOUT
        resp = self.session.post(
            self.url(path),
            data=dict(form),
            headers={"Content-Type": FORM_CONTENT_TYPE},
            timeout=REQUEST_TIMEOUT,
            stream=True,
        )
        return _read_body(resp, deadline)

    def fire_and_forget(self, request: Callable[..., Any], *args: Any) -> None:
        """
        Issue a cleanup-style request whose outcome does not matter.

        Used for session activation and logout: the response is discarded
        and transport errors are logged at debug level, never raised.
        """
        try:
            request(*args)
        except requests.RequestException as exc:
            log.debug("Ignoring failed best-effort request to %s: %s", args[0] if args else "?", exc)

    def close(self) -> None:
        self.session.close()
