"""IPv4 broadcast address calculation."""

from __future__ import annotations

from ipaddress import IPv4Address

LIMITED_BROADCAST = "255.255.255.255"


def _octets(value: str | IPv4Address) -> list[int]:
    """Split a dotted-decimal IPv4 value into 4 integer octets."""
    if isinstance(value, IPv4Address):
        return list(value.packed)

    parts = str(value).strip().split(".")
    if len(parts) != 4:
        raise ValueError(f"Expected 4 octets, got {value!r}")

    octets = [int(p) for p in parts]
    if any(o < 0 or o > 255 for o in octets):
        raise ValueError(f"Octet out of range in {value!r}")
    return octets


def compute_broadcast(address: str | IPv4Address, mask: str | IPv4Address) -> str:
    """
    Compute the broadcast address of the subnet ``address`` belongs to.

    Works octet by octet, so non-contiguous masks are handled bitwise:
    network = address & mask, broadcast = network | (~mask & 0xFF).

    Args:
        address: Interface IPv4 address, e.g. "192.168.11.1"
        mask: Subnet mask, e.g. "255.255.255.0"

    Returns:
        Broadcast address in dotted-decimal form, e.g. "192.168.11.255"
    """
    addr_octets = _octets(address)
    mask_octets = _octets(mask)

    broadcast = [
        (a & m) | (~m & 0xFF)
        for a, m in zip(addr_octets, mask_octets)
    ]
    return ".".join(str(o) for o in broadcast)
