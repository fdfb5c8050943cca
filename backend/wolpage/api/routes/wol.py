"""Wake-on-LAN JSON API: targets, interfaces and dispatch."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from wolpage.api.deps import get_dispatcher, get_platform, get_target_list
from wolpage.exceptions import (
    InvalidMacAddress,
    LocalSendFailure,
    NoBroadcastInterfaces,
    TargetListError,
)
from wolpage.schemas.system import InterfaceOut
from wolpage.schemas.wol import SendOutcomeOut, TargetOut, WolRequest, WolResponse
from wolpage.services.status import format_status
from wolpage.services.target_list import TargetList
from wolpage.services.wol_dispatcher import DispatchResult, PlatformKind, WolDispatcher

router = APIRouter()


@router.get("/targets", response_model=list[TargetOut])
def list_targets(target_list: TargetList = Depends(get_target_list)):
    """Configured targets in page order."""
    try:
        targets = target_list.load()
    except TargetListError as e:
        raise HTTPException(503, str(e))

    return [
        TargetOut(no=i, user_name=t.user_name, pc_name=t.pc_name, mac_address=t.mac_address)
        for i, t in enumerate(targets, start=1)
    ]


@router.get("/interfaces", response_model=list[InterfaceOut])
def list_interfaces(dispatcher: WolDispatcher = Depends(get_dispatcher)):
    """Active non-loopback IPv4 interfaces and their broadcast addresses."""
    return [
        InterfaceOut(name=i.name, address=i.address, netmask=i.netmask, broadcast=i.broadcast)
        for i in dispatcher.interfaces()
    ]


def _to_response(result: DispatchResult, platform: PlatformKind) -> WolResponse:
    return WolResponse(
        mac_address=result.mac_address,
        timestamp=result.timestamp,
        platform=platform.value,
        destinations=[d.address for d in result.destinations],
        outcomes=[
            SendOutcomeOut(
                destination=o.destination.address,
                explicit=o.destination.explicit,
                ok=o.ok,
                error=o.error,
            )
            for o in result.outcomes
        ],
        ok=result.ok,
        partial=result.partial,
        status=format_status(result),
    )


@router.post("/wol", response_model=WolResponse)
def wake(
    body: WolRequest,
    dispatcher: WolDispatcher = Depends(get_dispatcher),
    platform: PlatformKind = Depends(get_platform),
):
    """
    Send a magic packet.

    No broadcast interface gives 503, a failed local send gives 500. Both
    carry the full per-destination result in ``detail``.
    """
    try:
        result = dispatcher.dispatch(body.mac_address, platform)
    except InvalidMacAddress as e:
        raise HTTPException(422, str(e))

    response = _to_response(result, platform)
    try:
        result.raise_for_interfaces()
        result.raise_for_failures()
    except NoBroadcastInterfaces as e:
        raise HTTPException(503, {"error": str(e), "result": response.model_dump(mode="json")})
    except LocalSendFailure as e:
        raise HTTPException(500, {"error": str(e), "result": response.model_dump(mode="json")})

    return response
