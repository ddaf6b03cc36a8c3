"""
Tests for MAC address normalisation and matching.
"""

import unittest

from am_i_home.mac import match_mac, normalize_mac


class TestNormalizeMac(unittest.TestCase):
    def test_colon_separated_uppercase(self):
        self.assertEqual(normalize_mac("AA:BB:CC:DD:EE:FF"), "aabbccddeeff")

    def test_dash_and_dot_separators(self):
        self.assertEqual(normalize_mac("aa-bb-cc-dd-ee-ff"), "aabbccddeeff")
        self.assertEqual(normalize_mac("AABB.CCDD.EEFF"), "aabbccddeeff")

    def test_spaces_anywhere(self):
        self.assertEqual(normalize_mac(" AA BB:CC  DD-EE.FF "), "aabbccddeeff")

    def test_other_characters_pass_through(self):
        self.assertEqual(normalize_mac("Zz_01/Ä"), "zz_01/Ä")

    def test_empty_and_separator_only(self):
        self.assertEqual(normalize_mac(""), "")
        self.assertEqual(normalize_mac(":-. "), "")

    def test_idempotent(self):
        for mac in ("AA:BB:CC:DD:EE:FF", "aabb.ccdd.eeff", "not a mac", ""):
            once = normalize_mac(mac)
            self.assertEqual(normalize_mac(once), once)


class TestMatchMac(unittest.TestCase):
    def test_separator_and_case_insensitive(self):
        self.assertTrue(match_mac("AA:BB:CC:DD:EE:FF", "aa-bb-cc-dd-ee-ff"))
        self.assertTrue(match_mac("AABBCCDDEEFF", "aabbccddeeff"))

    def test_symmetric(self):
        self.assertTrue(match_mac("aa-bb-cc-dd-ee-ff", "AA:BB:CC:DD:EE:FF"))
        self.assertFalse(match_mac("AA:BB:CC:DD:EE:00", "aa:bb:cc:dd:ee:ff"))
        self.assertFalse(match_mac("aa:bb:cc:dd:ee:ff", "AA:BB:CC:DD:EE:00"))

    def test_reflexive(self):
        self.assertTrue(match_mac("garbage", "garbage"))


if __name__ == "__main__":
    unittest.main()
