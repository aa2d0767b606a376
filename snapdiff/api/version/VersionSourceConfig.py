"""Version source configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class VersionSourceConfig(BaseModel):
    """Which version lister to query and how."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["httm", "snapshot_dir"] = Field("httm", description="Version source backend")
    httm_command: str = Field("httm", min_length=1, description="httm executable for the httm backend")
    datasets: list[str] = Field(
        default_factory=list,
        description="Dataset mount points searched by the snapshot_dir backend",
    )
    snapshot_subdir: str = Field(
        ".zfs/snapshot",
        min_length=1,
        description="Directory under each dataset holding one directory per snapshot",
    )
