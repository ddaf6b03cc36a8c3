"""
Tests for the list / list-all / check commands.
"""

import io
import unittest
from unittest.mock import MagicMock

from am_i_home.client import RouterClient
from am_i_home.commands import check_by_matcher, list_active, list_devices
from am_i_home.errors import LoginRejected
from am_i_home.models import Device

DEVICES = [
    Device("AA:BB:CC:DD:EE:FF", "192.168.0.5", "phone", True),
    Device("11:22:33:44:55:66", "192.168.0.9", "laptop", False),
]


def _client(devices=DEVICES):
    client = MagicMock(spec=RouterClient)
    client.list_connected.return_value = list(devices)
    return client


class TestListCommands(unittest.TestCase):
    def test_list_all(self):
        out = io.StringIO()
        list_devices(_client(), out)
        lines = out.getvalue().splitlines()
        self.assertTrue(lines[0].startswith("MAC "))
        self.assertIn("Active", lines[0])
        self.assertEqual(len(lines), 4)
        self.assertIn("false", lines[3])

    def test_list_active_only(self):
        out = io.StringIO()
        list_active(_client(), out)
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 3)
        self.assertIn("phone", lines[2])
        self.assertNotIn("Active", lines[0])

    def test_error_propagates(self):
        client = _client()
        client.list_connected.side_effect = LoginRejected("login failed with provided credentials")
        with self.assertRaises(LoginRejected):
            list_devices(client, io.StringIO())


class TestCheckByMatcher(unittest.TestCase):
    def test_matches_mac_any_format(self):
        self.assertTrue(check_by_matcher(_client(), "aa-bb-cc-dd-ee-ff"))

    def test_matches_hostname_and_ip(self):
        self.assertTrue(check_by_matcher(_client(), "phone"))
        self.assertTrue(check_by_matcher(_client(), "192.168.0.5"))

    def test_inactive_device_not_matched(self):
        self.assertFalse(check_by_matcher(_client(), "laptop"))
        self.assertFalse(check_by_matcher(_client(), "11:22:33:44:55:66"))

    def test_unknown(self):
        self.assertFalse(check_by_matcher(_client(), "tablet"))


if __name__ == "__main__":
    unittest.main()
