"""Authentication submodule – salt challenge, password hashing, login."""

from am_i_home.auth.login import (
    LoginResponse,
    activate_session,
    login,
    request_salt,
    submit_credentials,
)
from am_i_home.auth.password import derive_hash

__all__ = [
    "LoginResponse",
    "activate_session",
    "login",
    "request_salt",
    "submit_credentials",
    "derive_hash",
]
