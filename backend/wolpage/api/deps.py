"""FastAPI dependency injection: services live on ``app.state``."""

from __future__ import annotations

from fastapi import Request

from wolpage.services.target_list import TargetList
from wolpage.services.wol_dispatcher import PlatformKind, WolDispatcher


def get_dispatcher(request: Request) -> WolDispatcher:
    return request.app.state.dispatcher


def get_target_list(request: Request) -> TargetList:
    return request.app.state.target_list


def get_platform(request: Request) -> PlatformKind:
    return request.app.state.platform
