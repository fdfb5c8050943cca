"""Target list: ordered WOL targets read from a JSON5 file."""

from __future__ import annotations

import logging
from pathlib import Path

import json5
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from wolpage.exceptions import TargetListError

logger = logging.getLogger(__name__)


class TargetRecord(BaseModel):
    """One row of the page."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    user_name: str = Field("", alias="userName")
    pc_name: str = Field("", alias="pcName")
    mac_address: str = Field(alias="macAddress")


class TargetListFile(BaseModel):
    mac_address_list: list[TargetRecord] = Field(alias="macAddressList")


class TargetList:
    """Reads the target file on every call so edits show up without a restart."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[TargetRecord]:
        """
        Parse the target file.

        Expected shape::

            {
              macAddressList: [
                { userName: "alice", pcName: "desk-01", macAddress: "AA:BB:CC:DD:EE:FF" },
              ],
            }

        Raises:
            TargetListError: file missing, not JSON5, or wrong shape
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.warning("Target list not found: %s", self._path)
            raise TargetListError(f"{self._path.name} was not found.")
        except OSError as e:
            logger.error("Failed to read target list %s: %s", self._path, e)
            raise TargetListError(f"{self._path.name} could not be read: {e}")

        try:
            data = json5.loads(raw)
            targets = TargetListFile.model_validate(data).mac_address_list
        except (ValueError, ValidationError) as e:
            logger.error("Malformed target list %s: %s", self._path, e)
            raise TargetListError(f"{self._path.name} is malformed: {e}")

        logger.debug("Loaded %d target(s) from %s", len(targets), self._path)
        return targets
