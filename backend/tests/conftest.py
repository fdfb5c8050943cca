"""Test fixtures: fake interfaces, recording sender and FastAPI test client."""

from unittest.mock import MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from wolpage.api.deps import get_dispatcher, get_platform, get_target_list
from wolpage.main import create_app
from wolpage.services.target_list import TargetList
from wolpage.services.wol_dispatcher import InterfaceAddress, PlatformKind, WolDispatcher
from wolpage.utils.wol import PacketSender, SendOutcome

TARGETS_JSON5 = """\
// WOL targets shown on the page
{
  macAddressList: [
    { userName: "alice", pcName: "desk-01", macAddress: "AA:BB:CC:DD:EE:FF" },
    { userName: "bob", pcName: "desk-02", macAddress: "11-22-33-44-55-66" },
  ],
}
"""


@pytest.fixture
def interfaces():
    """Two LAN interfaces on different subnets."""
    return [
        InterfaceAddress(name="eth0", address="192.168.1.50", netmask="255.255.255.0"),
        InterfaceAddress(name="wlan0", address="10.0.5.37", netmask="255.255.0.0"),
    ]


@pytest.fixture
def sender():
    """PacketSender double that records calls and always succeeds."""
    mock = MagicMock(spec=PacketSender)
    mock.send.side_effect = lambda packet, destination: SendOutcome(destination=destination, ok=True)
    return mock


@pytest.fixture
def dispatcher(sender, interfaces):
    return WolDispatcher(sender=sender, interface_source=lambda: interfaces)


@pytest.fixture
def target_file(tmp_path):
    path = tmp_path / "MacAddressList.json5"
    path.write_text(TARGETS_JSON5, encoding="utf-8")
    return path


@pytest.fixture
def platform():
    return PlatformKind.DEFAULT_BROADCAST


@pytest_asyncio.fixture
async def client(dispatcher, target_file, platform):
    """Provide an async test client with overridden service dependencies."""
    app = create_app()

    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    app.dependency_overrides[get_target_list] = lambda: TargetList(target_file)
    app.dependency_overrides[get_platform] = lambda: platform

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
