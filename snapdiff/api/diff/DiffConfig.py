"""Diff configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class DiffConfig(BaseModel):
    """Diff engine selection and options."""

    model_config = ConfigDict(extra="forbid")

    engine: Literal["auto", "myers", "bsdiff4"] = Field("auto", description="Diff engine name")
    context_lines: int = Field(3, ge=0, description="Unified diff context lines")
    ignore_whitespace: bool = Field(False, description="Ignore whitespace differences in text diffs")
    diff_command: str = Field("diff", min_length=1, description="Executable used by the myers engine")

    def engine_options(self) -> dict:
        """Options passed through to the engine."""
        return {
            "context_lines": self.context_lines,
            "ignore_whitespace": self.ignore_whitespace,
            "diff_command": self.diff_command,
        }
