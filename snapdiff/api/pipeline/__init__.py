"""Pipeline module - version lists to difference reports."""

from .CompareMode import CompareMode
from .PipelineController import PipelineController
from .TargetReport import TargetReport

__all__ = ["CompareMode", "PipelineController", "TargetReport"]
