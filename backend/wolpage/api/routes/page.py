"""The WOL page: target table with one wake button and status line per row."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool

from wolpage.api.deps import get_dispatcher, get_platform, get_target_list
from wolpage.config import settings
from wolpage.exceptions import InvalidMacAddress, TargetListError
from wolpage.schemas.wol import WakeFormSubmission
from wolpage.services.page import render_page
from wolpage.services.status import format_invalid_mac, format_status
from wolpage.services.target_list import TargetList, TargetRecord
from wolpage.services.wol_dispatcher import PlatformKind, WolDispatcher

logger = logging.getLogger(__name__)

router = APIRouter()


def _render(target_list: TargetList, statuses: list[str] | None = None) -> HTMLResponse:
    targets: list[TargetRecord] = []
    error = None
    try:
        targets = target_list.load()
    except TargetListError as e:
        error = str(e)
    return HTMLResponse(render_page(title=settings.app_name, targets=targets, statuses=statuses, error=error))


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(target_list: TargetList = Depends(get_target_list)):
    return _render(target_list)


@router.post("/", response_class=HTMLResponse, include_in_schema=False)
async def wake_from_page(
    request: Request,
    target_list: TargetList = Depends(get_target_list),
    dispatcher: WolDispatcher = Depends(get_dispatcher),
    platform: PlatformKind = Depends(get_platform),
):
    """Wake the row whose button was pressed and re-render with its status."""
    form = await request.form()
    try:
        submission = WakeFormSubmission(
            action=form.get("action"),
            target_mac_addresses=form.getlist("targetmacaddress"),
            statuses=form.getlist("status"),
        )
    except ValidationError:
        raise HTTPException(400, "Invalid form submission")

    if not submission.in_range():
        raise HTTPException(400, f"No target in row {submission.action}")

    mac_address = submission.target_mac_address
    statuses = list(submission.statuses)
    statuses += [""] * (len(submission.target_mac_addresses) - len(statuses))

    try:
        result = await run_in_threadpool(dispatcher.dispatch, mac_address, platform)
        statuses[submission.index] = format_status(result)
    except InvalidMacAddress:
        logger.warning("Row %d has an invalid MAC address: %r", submission.action, mac_address)
        statuses[submission.index] = format_invalid_mac(mac_address)

    return _render(target_list, statuses)

