"""
Example host enums, one per supported shape.

The three Status enums declare the same PENDING / IN_PROGRESS / COMPLETED
members so their behaviour can be compared side by side. Priority shows a
host that provides extended descriptions.
"""
from enum import Enum, IntEnum, auto
from typing import Optional

from enumfriendly.friendly import EnumFriendly


class StatusStr(EnumFriendly, str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


class StatusInt(EnumFriendly, IntEnum):
    PENDING = 1
    IN_PROGRESS = 2
    COMPLETED = 3


class StatusUnbacked(EnumFriendly, Enum):
    PENDING = auto()
    IN_PROGRESS = auto()
    COMPLETED = auto()


class Priority(EnumFriendly, str, Enum):
    LOW = "low"
    NORMAL = "normal"
    HIGH_PRIORITY = "high"

    def description(self) -> Optional[str]:
        return {
            Priority.LOW: "Handled when capacity allows",
            Priority.HIGH_PRIORITY: "Handled before anything else",
        }.get(self)


__all__ = ["StatusStr", "StatusInt", "StatusUnbacked", "Priority"]
