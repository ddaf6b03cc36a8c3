"""Router password lookup for the CLI."""

import getpass
import os
import sys
from pathlib import Path

from dotenv import dotenv_values

from .config import DOTENV_FILE, PASSWORD_ENV_VAR


class PasswordUnavailable(Exception):
    """No password source produced a value."""


def password_from_dotenv(path: Path | str = DOTENV_FILE) -> str:
    """Return ``AM_I_HOME_ROUTER_PASS`` from a .env file, or "" if absent."""
    path = Path(path)
    if not path.is_file():
        return ""
    return dotenv_values(path).get(PASSWORD_ENV_VAR) or ""


def resolve_password(flag_value: str, user: str, router: str) -> str:
    """
    Resolve the router password.

    Order: the ``--pass`` flag, the ``AM_I_HOME_ROUTER_PASS`` env var, the
    same key in ``./.env``, then an interactive prompt when stdin is a TTY.

    Raises:
        PasswordUnavailable: nothing found and no terminal to prompt on, or
            the prompt was aborted (Ctrl-D / Ctrl-C)
    """
    if flag_value:
        return flag_value
    password = os.environ.get(PASSWORD_ENV_VAR, "")
    if password:
        return password
    password = password_from_dotenv()
    if password:
        return password
    if sys.stdin.isatty():
        try:
            return getpass.getpass(f"Password for {user}@{router}: ")
        except (EOFError, KeyboardInterrupt) as exc:
            raise PasswordUnavailable(f"failed reading password: {exc!r}") from exc
    raise PasswordUnavailable(
        f"--pass is required when not running interactively and {PASSWORD_ENV_VAR} not set"
    )
