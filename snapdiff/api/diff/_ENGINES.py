"""Diff engine registry."""

from .Bsdiff4Engine import Bsdiff4Engine
from .MyersEngine import MyersEngine

# Registry of available engines
ENGINES = {
    "bsdiff4": Bsdiff4Engine(),
    "myers": MyersEngine(),
}
