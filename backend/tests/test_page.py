"""Tests for the HTML page: render, wake from form, fallback paths."""

import pytest
from httpx import AsyncClient

from wolpage.api.deps import get_target_list
from wolpage.services.target_list import TargetList

FORM = {
    "targetmacaddress": ["AA:BB:CC:DD:EE:FF", "11-22-33-44-55-66"],
    "status": ["", "earlier status"],
}


@pytest.mark.asyncio
async def test_get_renders_rows(client: AsyncClient, sender):
    resp = await client.get("/")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    html = resp.text
    assert html.count('name="targetmacaddress"') == 2
    assert 'value="AA:BB:CC:DD:EE:FF"' in html
    assert "desk-02" in html
    assert '<button name="action" value="2">' in html
    sender.send.assert_not_called()


@pytest.mark.asyncio
async def test_post_wakes_selected_row(client: AsyncClient, sender):
    resp = await client.post("/", data={**FORM, "action": "1"})

    assert resp.status_code == 200
    sender.send.assert_called_once()
    packet = sender.send.call_args.args[0]
    assert packet.mac_address == "AA:BB:CC:DD:EE:FF"
    assert "| AA:BB:CC:DD:EE:FF | Sent magic packet to 255.255.255.255" in resp.text
    assert 'value="earlier status"' in resp.text


@pytest.mark.asyncio
async def test_post_second_row(client: AsyncClient, sender):
    resp = await client.post("/", data={**FORM, "action": "2"})

    assert resp.status_code == 200
    assert sender.send.call_args.args[0].mac_address == "11:22:33:44:55:66"
    assert "earlier status" not in resp.text


@pytest.mark.asyncio
@pytest.mark.parametrize("action", ["0", "3", "abc"])
async def test_post_bad_action(client: AsyncClient, sender, action):
    resp = await client.post("/", data={**FORM, "action": action})

    assert resp.status_code == 400
    sender.send.assert_not_called()


@pytest.mark.asyncio
async def test_post_invalid_mac_shows_status(client: AsyncClient, sender):
    resp = await client.post("/", data={"targetmacaddress": ["nope"], "status": [""], "action": "1"})

    assert resp.status_code == 200
    assert "| nope | Invalid MAC address" in resp.text
    sender.send.assert_not_called()


@pytest.mark.asyncio
async def test_missing_target_list(client: AsyncClient, tmp_path):
    client._transport.app.dependency_overrides[get_target_list] = (
        lambda: TargetList(tmp_path / "missing" / "MacAddressList.json5")
    )

    resp = await client.get("/")

    assert resp.status_code == 200
    assert "MacAddressList.json5 was not found." in resp.text


@pytest.mark.asyncio
async def test_html_is_escaped(client: AsyncClient, target_file):
    target_file.write_text(
        '{ macAddressList: [{ userName: "<script>x</script>", pcName: "pc", macAddress: "AA:BB:CC:DD:EE:FF" }] }',
        encoding="utf-8",
    )

    resp = await client.get("/")

    assert "<script>x</script>" not in resp.text
    assert "&lt;script&gt;" in resp.text


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/favicon.ico", "/other/page"])
async def test_other_paths(client: AsyncClient, path):
    resp = await client.get(path)

    assert resp.status_code == 200
    assert resp.text == "no data..."


@pytest.mark.asyncio
@pytest.mark.parametrize("method", ["PUT", "PATCH", "DELETE", "OPTIONS"])
async def test_other_paths_any_method(client: AsyncClient, method):
    resp = await client.request(method, "/favicon.ico")

    assert resp.status_code == 200
    assert resp.text == "no data..."


@pytest.mark.asyncio
async def test_other_paths_head(client: AsyncClient):
    resp = await client.head("/favicon.ico")

    assert resp.status_code == 200
