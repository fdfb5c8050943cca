"""Tests for the JSON5 target list loader."""

import pytest

from wolpage.exceptions import TargetListError
from wolpage.services.target_list import TargetList


def test_loads_json5_in_order(target_file):
    targets = TargetList(target_file).load()

    assert [t.user_name for t in targets] == ["alice", "bob"]
    assert targets[0].pc_name == "desk-01"
    assert targets[1].mac_address == "11-22-33-44-55-66"


def test_plain_json(tmp_path):
    path = tmp_path / "targets.json"
    path.write_text('{"macAddressList": [{"macAddress": "AA:BB:CC:DD:EE:FF"}]}', encoding="utf-8")

    targets = TargetList(path).load()

    assert len(targets) == 1
    assert targets[0].user_name == ""


def test_missing_file(tmp_path):
    with pytest.raises(TargetListError, match="was not found"):
        TargetList(tmp_path / "MacAddressList.json5").load()


def test_not_json5(tmp_path):
    path = tmp_path / "MacAddressList.json5"
    path.write_text("{ macAddressList: [", encoding="utf-8")

    with pytest.raises(TargetListError, match="malformed"):
        TargetList(path).load()


def test_wrong_shape(tmp_path):
    path = tmp_path / "MacAddressList.json5"
    path.write_text("{ targets: [] }", encoding="utf-8")

    with pytest.raises(TargetListError, match="malformed"):
        TargetList(path).load()


def test_reread_on_every_load(target_file):
    target_list = TargetList(target_file)
    assert len(target_list.load()) == 2

    target_file.write_text("{ macAddressList: [] }", encoding="utf-8")

    assert target_list.load() == []
