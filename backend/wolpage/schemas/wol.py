"""Wake-on-LAN request/response schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class TargetOut(BaseModel):
    """One configured WOL target."""
    no: int
    user_name: str
    pc_name: str
    mac_address: str


class WolRequest(BaseModel):
    mac_address: str = Field(min_length=1)


class SendOutcomeOut(BaseModel):
    destination: str
    explicit: bool
    ok: bool
    error: str | None = None


class WolResponse(BaseModel):
    """Result of one dispatch. ``ok`` is False on any local send failure."""
    mac_address: str
    timestamp: datetime
    platform: str
    destinations: list[str] = []
    outcomes: list[SendOutcomeOut] = []
    ok: bool
    partial: bool = False
    status: str


class WakeFormSubmission(BaseModel):
    """
    Form posted by the page.

    ``targetmacaddress`` and ``status`` repeat once per row in table order;
    ``action`` is the 1-based row number of the pressed button.
    """
    action: int
    target_mac_addresses: list[str]
    statuses: list[str] = []

    @property
    def index(self) -> int:
        return self.action - 1

    @property
    def target_mac_address(self) -> str:
        return self.target_mac_addresses[self.index]

    def in_range(self) -> bool:
        return 0 <= self.index < len(self.target_mac_addresses)
