"""MAC address canonicalisation used for device lookups."""

# Separators seen in the wild: 00:11:22..., 00-11-22..., 0011.2233.4455
_MAC_SEPARATORS = str.maketrans("", "", ":-. ")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def normalize_mac(mac: str) -> str:
    """
    Return *mac* lowercased with every ``:``, ``-``, ``.`` and space removed.

    Only ASCII letters are folded; any other character passes through, so
    malformed input simply normalises to whatever is left.
    """
    return mac.translate(_MAC_SEPARATORS).translate(_ASCII_LOWER)


def match_mac(a: str, b: str) -> bool:
    """Compare two MAC addresses after normalisation."""
    return normalize_mac(a) == normalize_mac(b)
