"""Top-level snapdiff configuration."""

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from ..diff.DiffConfig import DiffConfig
from ..version.VersionSourceConfig import VersionSourceConfig
from .LogConfig import LogConfig


class SnapdiffConfig(BaseModel):
    """Top-level configuration for snapdiff layers."""

    model_config = ConfigDict(extra="forbid")

    source: VersionSourceConfig = Field(default_factory=VersionSourceConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on SNAPDIFF_HOME or default to ~/.snapdiff."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "SnapdiffConfig":
        """Load and validate config from file.

        A missing config file yields the defaults; every section is optional.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object (found: {type(raw).__name__})")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert SnapdiffConfig instance to a dictionary for serialization."""
        return {
            "source": self.source.model_dump(),
            "diff": self.diff.model_dump(),
            "log": self.log.model_dump(),
        }
