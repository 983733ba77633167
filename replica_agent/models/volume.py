"""Logical volume and mount models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

# Serialized with PascalCase keys, the shape orchestrator clients read.
_wire_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class LogicalVolume(BaseModel):
    model_config = _wire_config

    name: str
    group_name: str = ""
    path: str = ""
    is_snapshot: bool = False
    snapshot_percent: float = 0.0

    def is_snapshot_valid(self) -> bool:
        """A snapshot is usable until its copy-on-write space is exhausted."""
        if not self.is_snapshot:
            return False
        return self.snapshot_percent < 100.0


class Mount(BaseModel):
    model_config = _wire_config

    path: str
    device: str = ""
    lv_path: str = Field(default="", alias="LVPath")
    file_system: str = ""
    is_mounted: bool = False
    disk_usage: int = 0
