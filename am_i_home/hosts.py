"""Host table retrieval and parsing."""

from typing import Any

import requests

from .config import HOST_TBL_URL, STATUS_OK
from .errors import CatalogError, MalformedResponse, TransportError
from .logging_setup import log
from .models import Device
from .network.client import RouterSession

_RECORD_FIELDS = ("physaddress", "ipaddress", "hostname", "active")


def _device_from_record(record: Any) -> Device:
    # JSON null leaves a record or field at its empty value
    if record is None:
        record = {}
    if not isinstance(record, dict):
        raise MalformedResponse("failed parsing host table JSON: host entry is not an object")
    values = {}
    for name in _RECORD_FIELDS:
        value = record.get(name)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise MalformedResponse(
                f"failed parsing host table JSON: field {name!r} is not a string"
            )
        values[name] = value
    return Device(
        mac=values["physaddress"],
        ip=values["ipaddress"],
        hostname=values["hostname"],
        active=values["active"] == "true",
    )


def parse_host_table(body: Any) -> list[Device]:
    """
    Map the decoded ``hostTbl`` envelope to Device records.

    Expected shape::

        {"error": "ok", "message": "...", "token": "...",
         "data": {"hostTbl": [{"physaddress": "...", "ipaddress": "...",
                               "hostname": "...", "active": "true"}]}}

    Router order is preserved.  ``active`` is True only for the literal
    string "true".
    """
    if body is None:
        body = {}
    if not isinstance(body, dict):
        raise MalformedResponse("failed parsing host table JSON: not a JSON object")

    status = body.get("error")
    if status is None:
        status = ""
    if not isinstance(status, str):
        raise MalformedResponse("failed parsing host table JSON: 'error' is not a string")

    data = body.get("data")
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedResponse("failed parsing host table JSON: 'data' is not an object")
    records = data.get("hostTbl")
    if records is None:
        records = []
    if not isinstance(records, list):
        raise MalformedResponse("failed parsing host table JSON: 'hostTbl' is not a list")

    if status != STATUS_OK:
        raise CatalogError(status)

    return [_device_from_record(r) for r in records]


def fetch_devices(transport: RouterSession) -> list[Device]:
    """GET the host table on an authenticated session."""
    try:
        resp = transport.get(HOST_TBL_URL)
    except requests.RequestException as exc:
        raise TransportError(f"failed fetching host table: {exc}") from exc

    try:
        body = resp.json()
    except ValueError as exc:
        raise MalformedResponse(f"failed parsing host table JSON: {exc}") from exc

    devices = parse_host_table(body)
    log.debug("Host table: %d entries", len(devices))
    return devices
