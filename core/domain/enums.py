from __future__ import annotations

from enum import Enum


class ItemKind(str, Enum):
    MACHINE = "machine"
    SOFTWARE = "software"


__all__ = ["ItemKind"]
