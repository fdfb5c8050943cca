"""Business logic services: construction from settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wolpage.config import Settings
    from wolpage.services.target_list import TargetList
    from wolpage.services.wol_dispatcher import PlatformKind, WolDispatcher

logger = logging.getLogger(__name__)


def resolve_platform(name: str) -> PlatformKind:
    """``auto`` detects from the running OS; anything else is taken literally."""
    from wolpage.services.wol_dispatcher import PlatformKind

    if name == "auto":
        return PlatformKind.detect()
    return PlatformKind(name)


def create_dispatcher(settings: Settings) -> WolDispatcher:
    from wolpage.services.wol_dispatcher import WolDispatcher
    from wolpage.utils.wol import PacketSender

    return WolDispatcher(
        sender=PacketSender(port=settings.wol_port),
        default_broadcast=settings.default_broadcast,
    )


def create_target_list(settings: Settings) -> TargetList:
    from wolpage.services.target_list import TargetList

    return TargetList(settings.target_list_path)
