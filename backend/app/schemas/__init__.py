from .category import CategoryCreate, CategoryRead
from .common import DATETIME_FORMAT, CamelModel, FormattedDatetime
from .event import (
    EventAdminUpdate,
    EventCreate,
    EventFullRead,
    EventShortRead,
    EventUserUpdate,
    Location,
)
from .participation_request import (
    EventRequestStatusUpdateRequest,
    EventRequestStatusUpdateResult,
    ParticipationRequestRead,
)
from .stats import HitCreate, ViewStats
from .user import UserCreate, UserRead, UserShort

__all__ = [
    "DATETIME_FORMAT",
    "CamelModel",
    "CategoryCreate",
    "CategoryRead",
    "EventAdminUpdate",
    "EventCreate",
    "EventFullRead",
    "EventRequestStatusUpdateRequest",
    "EventRequestStatusUpdateResult",
    "EventShortRead",
    "EventUserUpdate",
    "FormattedDatetime",
    "HitCreate",
    "Location",
    "ParticipationRequestRead",
    "UserCreate",
    "UserRead",
    "UserShort",
    "ViewStats",
]
