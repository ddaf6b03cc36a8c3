"""
Network operations module for HTTP client setup and request handling.
"""

from am_i_home.network.client import RouterSession, build_session, base_url

__all__ = ["RouterSession", "build_session", "base_url"]
