"""
Tests for host table retrieval and parsing.
"""

import unittest

import requests

from am_i_home.config import HOST_TBL_URL
from am_i_home.errors import CatalogError, MalformedResponse, TransportError
from am_i_home.hosts import fetch_devices, parse_host_table
from am_i_home.models import Device
from am_i_home.network.client import RouterSession

from router_fakes import BASE, HOST_TBL_OK, FakeRouter, json_response, text_response


def _envelope(records, status="ok"):
    return {"error": status, "message": "", "data": {"hostTbl": records}, "token": "x"}


class TestParseHostTable(unittest.TestCase):
    def test_maps_record_to_device(self):
        devices = parse_host_table(_envelope([
            {"physaddress": "AA:BB:CC:DD:EE:FF", "ipaddress": "192.168.0.5",
             "hostname": "phone", "active": "true"},
        ]))
        self.assertEqual(
            devices,
            [Device(mac="AA:BB:CC:DD:EE:FF", ip="192.168.0.5", hostname="phone", active=True)],
        )

    def test_only_literal_true_is_active(self):
        records = [
            {"physaddress": "a", "ipaddress": "1", "hostname": "h", "active": flag}
            for flag in ("maybe", "false", "True", "")
        ]
        self.assertEqual([d.active for d in parse_host_table(_envelope(records))],
                         [False, False, False, False])

    def test_preserves_router_order(self):
        devices = parse_host_table(HOST_TBL_OK)
        self.assertEqual([d.hostname for d in devices], ["phone", "laptop"])

    def test_empty_list_is_valid(self):
        self.assertEqual(parse_host_table(_envelope([])), [])

    def test_missing_data_is_empty(self):
        self.assertEqual(parse_host_table({"error": "ok"}), [])

    def test_non_ok_status(self):
        with self.assertRaises(CatalogError) as ctx:
            parse_host_table(_envelope([], status="session_expired"))
        self.assertEqual(ctx.exception.status, "session_expired")
        self.assertIn("session_expired", str(ctx.exception))

    def test_null_fields_become_empty(self):
        devices = parse_host_table(_envelope([
            {"physaddress": "AA:BB:CC:DD:EE:FF", "ipaddress": "192.168.0.5",
             "hostname": None, "active": None},
        ]))
        self.assertEqual(
            devices,
            [Device(mac="AA:BB:CC:DD:EE:FF", ip="192.168.0.5", hostname="", active=False)],
        )

    def test_null_record_becomes_empty_device(self):
        self.assertEqual(parse_host_table(_envelope([None])),
                         [Device(mac="", ip="", hostname="", active=False)])

    def test_null_status_is_catalog_error(self):
        body = _envelope([])
        body["error"] = None
        with self.assertRaises(CatalogError) as ctx:
            parse_host_table(body)
        self.assertEqual(ctx.exception.status, "")

    def test_null_body_is_catalog_error(self):
        with self.assertRaises(CatalogError):
            parse_host_table(None)

    def test_wrong_shapes(self):
        for body in (
            [],
            {"error": "ok", "data": []},
            {"error": "ok", "data": {"hostTbl": {"a": 1}}},
            {"error": 1},
            _envelope(["not a record"]),
            _envelope([{"physaddress": 12}]),
        ):
            with self.subTest(body=body):
                with self.assertRaises(MalformedResponse):
                    parse_host_table(body)


class TestFetchDevices(unittest.TestCase):
    def _transport(self, reply):
        transport = RouterSession(BASE)
        fake = FakeRouter({("GET", HOST_TBL_URL): [reply]}).install(transport.session)
        return transport, fake

    def test_fetch(self):
        transport, fake = self._transport(json_response(HOST_TBL_OK))
        devices = fetch_devices(transport)
        self.assertEqual(len(devices), 2)
        self.assertEqual(fake.paths, [("GET", HOST_TBL_URL)])

    def test_invalid_json(self):
        transport, _ = self._transport(text_response("<html>login</html>"))
        with self.assertRaises(MalformedResponse) as ctx:
            fetch_devices(transport)
        self.assertIn("failed parsing host table JSON", str(ctx.exception))

    def test_transport_failure(self):
        transport, _ = self._transport(requests.Timeout("timed out"))
        with self.assertRaises(TransportError) as ctx:
            fetch_devices(transport)
        self.assertIn("failed fetching host table", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
