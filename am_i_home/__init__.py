"""
am_i_home
=========
Python package for checking which devices are connected to a Vodafone
HomeStation router, through the router's own web-management JSON API.

Package structure
-----------------
am_i_home/
├── __init__.py       – package init and public API
├── config.py         – endpoints, timeout, headers and other constants
├── errors.py         – RouterError hierarchy
├── models.py         – Device and SaltChallenge records
├── mac.py            – MAC address normalisation / matching
├── client.py         – HomeStationClient (login → host table → logout)
├── hosts.py          – host table fetch and parsing
├── logging_setup.py  – colored logger
├── cli.py            – argparse CLI (``python -m am_i_home``)
├── commands.py       – list / list-all / check
├── credentials.py    – password lookup (flag, env, .env, prompt)
├── table.py          – plain-text table rendering
├── auth/             – salt challenge, PBKDF2 hashing, login
└── network/          – requests.Session transport

Quick start
-----------
    from am_i_home import HomeStationClient, match_mac

    client = HomeStationClient("http://192.168.0.1", "admin", "your_password")
    for device in client.list_connected():
        if device.active and match_mac(device.mac, "aa-bb-cc-dd-ee-ff"):
            print("home:", device.hostname)
"""

from .client import HomeStationClient, RouterClient
from .errors import (
    CatalogError,
    LoginBlocked,
    LoginError,
    LoginRejected,
    MalformedResponse,
    MissingChallengeData,
    RouterError,
    TransportError,
)
from .mac import match_mac, normalize_mac
from .models import Device

__all__ = [
    "HomeStationClient",
    "RouterClient",
    "Device",
    "normalize_mac",
    "match_mac",
    "RouterError",
    "TransportError",
    "MalformedResponse",
    "LoginError",
    "MissingChallengeData",
    "LoginRejected",
    "LoginBlocked",
    "CatalogError",
]
