"""Domain errors for magic packet dispatch and the target list."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wolpage.utils.wol import SendOutcome


class WolPageError(Exception):
    """Base class for all wolpage errors."""


class InvalidMacAddress(WolPageError, ValueError):
    """MAC string does not resolve to exactly 6 octets in [0, 255]."""

    def __init__(self, mac_address: str):
        self.mac_address = mac_address
        super().__init__(f"Invalid MAC address: {mac_address!r}")


class NoBroadcastInterfaces(WolPageError):
    """No active non-loopback IPv4 interface was found on this host."""

    def __init__(self):
        super().__init__("No broadcast interfaces available")


class LocalSendFailure(WolPageError):
    """One or more local UDP send calls failed."""

    def __init__(self, failures: list[SendOutcome]):
        self.failures = failures
        targets = ", ".join(f"{f.destination.address} ({f.error})" for f in failures)
        super().__init__(f"Failed to send magic packet to {targets}")


class TargetListError(WolPageError):
    """Target list file is missing or malformed."""
