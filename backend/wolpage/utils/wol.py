"""Wake-on-LAN (WOL) implementation."""

from __future__ import annotations

import logging
import re
import socket
from dataclasses import dataclass

from wolpage.exceptions import InvalidMacAddress
from wolpage.utils.broadcast import LIMITED_BROADCAST

logger = logging.getLogger(__name__)

WOL_PORT = 9
MAGIC_HEADER = b"\xff" * 6
MAC_REPETITIONS = 16

_SEPARATORS = re.compile(r"[:-]")
_OCTET = re.compile(r"[0-9a-fA-F]{1,2}")


def parse_mac(mac_address: str) -> bytes:
    """
    Parse a MAC address into its 6 raw octets.

    Accepts "AA:BB:CC:DD:EE:FF", "aa-bb-cc-dd-ee-ff" or bare "AABBCCDDEEFF".

    Raises:
        InvalidMacAddress: if the input is not exactly 6 octets in [0, 255]
    """
    if not isinstance(mac_address, str):
        raise InvalidMacAddress(str(mac_address))

    value = mac_address.strip()
    if _SEPARATORS.search(value):
        parts = _SEPARATORS.split(value)
    elif len(value) == 12:
        parts = [value[i:i + 2] for i in range(0, 12, 2)]
    else:
        raise InvalidMacAddress(mac_address)

    if len(parts) != 6 or not all(_OCTET.fullmatch(p) for p in parts):
        raise InvalidMacAddress(mac_address)

    return bytes(int(p, 16) for p in parts)


def format_mac(mac_bytes: bytes) -> str:
    """Canonical upper-case, colon-separated form."""
    return ":".join(f"{b:02X}" for b in mac_bytes)


@dataclass(frozen=True)
class MagicPacket:
    mac_address: str  # canonical form
    payload: bytes

    def __bytes__(self) -> bytes:
        return self.payload

    def __len__(self) -> int:
        return len(self.payload)


@dataclass(frozen=True)
class BroadcastTarget:
    """Where a packet goes. ``explicit=False`` means the OS default broadcast."""
    address: str = LIMITED_BROADCAST
    explicit: bool = False


@dataclass(frozen=True)
class SendOutcome:
    destination: BroadcastTarget
    ok: bool
    error: str | None = None


def build_packet(mac_address: str) -> MagicPacket:
    """
    Build a Wake-on-LAN magic packet.

    Args:
        mac_address: MAC address in format "AA:BB:CC:DD:EE:FF" or "AA-BB-CC-DD-EE-FF"
    """
    mac_bytes = parse_mac(mac_address)
    # Magic packet: 6x 0xFF + 16x MAC address
    packet = MAGIC_HEADER + mac_bytes * MAC_REPETITIONS
    return MagicPacket(mac_address=format_mac(mac_bytes), payload=packet)


class PacketSender:
    """Sends magic packets as single UDP broadcast datagrams."""

    def __init__(self, port: int = WOL_PORT):
        self.port = port

    def send(self, packet: MagicPacket, destination: BroadcastTarget) -> SendOutcome:
        """
        Send one datagram. Socket errors are reported in the outcome, not raised.

        No acknowledgement exists in WOL: ``ok`` only means the local
        ``sendto`` call succeeded.
        """
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
                sock.sendto(packet.payload, (destination.address, self.port))
        except OSError as e:
            logger.error(
                "Failed to send magic packet for %s to %s:%s: %s",
                packet.mac_address, destination.address, self.port, e,
            )
            return SendOutcome(destination=destination, ok=False, error=str(e))

        logger.info(
            "Sent magic packet for %s to %s:%s",
            packet.mac_address, destination.address, self.port,
        )
        return SendOutcome(destination=destination, ok=True)

