"""Human-readable status lines for the page's per-target status column."""

from __future__ import annotations

from datetime import datetime

from wolpage.services.wol_dispatcher import DispatchResult

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"


def format_timestamp(ts: datetime | None = None) -> str:
    return (ts or datetime.now()).strftime(TIMESTAMP_FORMAT)


def format_status(result: DispatchResult) -> str:
    """``<timestamp> | <mac> | <what happened>``"""
    prefix = f"{format_timestamp(result.timestamp)} | {result.mac_address}"

    if result.no_interfaces:
        return f"{prefix} | No broadcast interfaces available"

    failures = result.failures
    if not failures:
        sent = ",".join(d.address for d in result.destinations)
        return f"{prefix} | Sent magic packet to {sent}"

    failed = ",".join(f"{o.destination.address} ({o.error})" for o in failures)
    line = f"{prefix} | Failed to send magic packet to {failed}"
    if result.partial:
        sent = ",".join(o.destination.address for o in result.outcomes if o.ok)
        line += f"; sent to {sent}"
    return line


def format_invalid_mac(mac_address: str, ts: datetime | None = None) -> str:
    return f"{format_timestamp(ts)} | {mac_address} | Invalid MAC address"
