"""Configuration models."""

from .get_package_version import get_package_version
from .LogConfig import LogConfig
from .SnapdiffConfig import SnapdiffConfig

__all__ = ["LogConfig", "SnapdiffConfig", "get_package_version"]
