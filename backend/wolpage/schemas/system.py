"""System status schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    version: str
    service: str = "wolpage"
    platform: str


class InterfaceOut(BaseModel):
    """Local IPv4 interface and the broadcast address derived from it."""
    name: str
    address: str
    netmask: str
    broadcast: str
