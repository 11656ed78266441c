from .category import Category
from .event import Event, EventState
from .hit import Hit
from .participation_request import ParticipationRequest, ParticipationStatus
from .user import User

__all__ = [
    "Category",
    "Event",
    "EventState",
    "Hit",
    "ParticipationRequest",
    "ParticipationStatus",
    "User",
]
