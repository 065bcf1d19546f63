"""
Domain Events
Notifications published by the host when a profile section changes
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from .entities.profile import UserId
from .enums import ProfileSection


class SectionChangeType(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class SectionChangedEvent:
    """A profile section was created, updated or deleted"""

    user_id: UserId
    section: ProfileSection
    change_type: SectionChangeType = SectionChangeType.UPDATED
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
