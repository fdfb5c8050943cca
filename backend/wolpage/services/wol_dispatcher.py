"""Magic packet dispatch across all local broadcast domains."""

from __future__ import annotations

import ipaddress
import logging
import socket
import sys
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable

import psutil

from wolpage.exceptions import LocalSendFailure, NoBroadcastInterfaces
from wolpage.utils.broadcast import LIMITED_BROADCAST, compute_broadcast
from wolpage.utils.wol import BroadcastTarget, PacketSender, SendOutcome, build_packet

logger = logging.getLogger(__name__)


class PlatformKind(str, Enum):
    EXPLICIT_BROADCAST = "explicit_broadcast"  # Windows
    DEFAULT_BROADCAST = "default_broadcast"

    @classmethod
    def detect(cls, platform: str | None = None) -> PlatformKind:
        """Map a ``sys.platform`` string to its broadcast addressing rule."""
        platform = platform or sys.platform
        if platform == "win32":
            return cls.EXPLICIT_BROADCAST
        return cls.DEFAULT_BROADCAST


@dataclass(frozen=True)
class InterfaceAddress:
    name: str
    address: str
    netmask: str

    @property
    def broadcast(self) -> str:
        return compute_broadcast(self.address, self.netmask)


@dataclass(frozen=True)
class DispatchResult:
    """What one dispatch did. Lives for a single request."""
    mac_address: str
    timestamp: datetime
    destinations: list[BroadcastTarget] = field(default_factory=list)
    outcomes: list[SendOutcome] = field(default_factory=list)

    @property
    def no_interfaces(self) -> bool:
        return not self.destinations

    @property
    def failures(self) -> list[SendOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def ok(self) -> bool:
        return bool(self.outcomes) and not self.failures

    @property
    def partial(self) -> bool:
        """Some destinations sent, others failed."""
        failed = len(self.failures)
        return 0 < failed < len(self.outcomes)

    def raise_for_interfaces(self) -> None:
        if self.no_interfaces:
            raise NoBroadcastInterfaces()

    def raise_for_failures(self) -> None:
        if self.failures:
            raise LocalSendFailure(self.failures)


def list_ipv4_interfaces() -> list[InterfaceAddress]:
    """Active, non-loopback IPv4 interface addresses of this host."""
    stats = psutil.net_if_stats()
    result: list[InterfaceAddress] = []

    for name, addrs in psutil.net_if_addrs().items():
        if name in stats and not stats[name].isup:
            continue
        for addr in addrs:
            if addr.family != socket.AF_INET or not addr.netmask:
                continue
            try:
                if ipaddress.IPv4Address(addr.address).is_loopback:
                    continue
            except ipaddress.AddressValueError:
                logger.debug("Skipping unparseable address %r on %s", addr.address, name)
                continue
            result.append(InterfaceAddress(name=name, address=addr.address, netmask=addr.netmask))

    return result


class WolDispatcher:
    """Computes broadcast destinations for this host and sends magic packets to them."""

    def __init__(
        self,
        sender: PacketSender | None = None,
        interface_source: Callable[[], list[InterfaceAddress]] = list_ipv4_interfaces,
        default_broadcast: str = LIMITED_BROADCAST,
    ):
        self._sender = sender or PacketSender()
        self._interface_source = interface_source
        self._default_broadcast = default_broadcast

    def interfaces(self) -> list[InterfaceAddress]:
        return self._interface_source()

    def broadcast_addresses(self) -> list[str]:
        """Broadcast address per qualifying interface, deduplicated, first-seen order."""
        seen: dict[str, None] = {}
        for iface in self.interfaces():
            seen.setdefault(iface.broadcast, None)
        return list(seen)

    def dispatch(self, mac_address: str, platform: PlatformKind) -> DispatchResult:
        """
        Wake the machine with ``mac_address``.

        On ``EXPLICIT_BROADCAST`` platforms one packet is sent per distinct
        interface broadcast address: interfaces sharing a subnet get a single
        send, not one each. Elsewhere a single packet goes to the OS default
        broadcast. Zero qualifying interfaces yields an empty result.

        Raises:
            InvalidMacAddress: if ``mac_address`` is malformed
        """
        packet = build_packet(mac_address)
        timestamp = datetime.now()
        broadcasts = self.broadcast_addresses()

        if not broadcasts:
            logger.warning("No broadcast interfaces available, magic packet for %s not sent", packet.mac_address)
            return DispatchResult(mac_address=packet.mac_address, timestamp=timestamp)

        if platform == PlatformKind.EXPLICIT_BROADCAST:
            destinations = [BroadcastTarget(address=b, explicit=True) for b in broadcasts]
        else:
            destinations = [BroadcastTarget(address=self._default_broadcast, explicit=False)]

        outcomes = []
        for destination in destinations:
            # Fresh payload per send
            outcomes.append(self._sender.send(build_packet(mac_address), destination))

        result = DispatchResult(
            mac_address=packet.mac_address,
            timestamp=timestamp,
            destinations=destinations,
            outcomes=outcomes,
        )
        if result.failures:
            logger.error(
                "Magic packet for %s failed on %d of %d destination(s)",
                packet.mac_address, len(result.failures), len(outcomes),
            )
        return result
