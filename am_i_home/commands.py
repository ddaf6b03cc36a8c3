"""CLI commands built on a RouterClient."""

import sys
from typing import TextIO

from .client import RouterClient
from .mac import match_mac
from .table import print_records


def list_devices(client: RouterClient, stream: TextIO | None = None) -> None:
    """Print every device in the host table."""
    stream = stream or sys.stdout
    devices = client.list_connected()
    print_records(stream, devices, ("mac", "ip", "hostname", "active"),
                  headers=("MAC", "IP", "Hostname", "Active"))


def list_active(client: RouterClient, stream: TextIO | None = None) -> None:
    """Print only devices the router marks as active."""
    stream = stream or sys.stdout
    devices = [d for d in client.list_connected() if d.active]
    print_records(stream, devices, ("mac", "ip", "hostname"),
                  headers=("MAC", "IP", "Hostname"))


def check_by_matcher(client: RouterClient, matcher: str) -> bool:
    """True if an active device matches *matcher* by MAC, hostname or IP."""
    for device in client.list_connected():
        if device.active and (
            match_mac(device.mac, matcher)
            or device.hostname == matcher
            or device.ip == matcher
        ):
            return True
    return False
