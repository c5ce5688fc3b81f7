from __future__ import annotations
from enum import IntFlag

class ItemFlag(IntFlag):
    browsable = 1
    playable = 2
