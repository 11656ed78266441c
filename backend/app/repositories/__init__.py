"""
Persistence gateway.

Each repository wraps the request-scoped ``Session`` and exposes only the
lookups and count queries the services need. ``save``/``save_all`` commit,
so a service that persists a batch through ``save_all`` gets one transaction.
"""

from .categories import CategoryRepository
from .events import EventRepository
from .hits import HitRepository
from .requests import RequestRepository
from .users import UserRepository

__all__ = [
    "CategoryRepository",
    "EventRepository",
    "HitRepository",
    "RequestRepository",
    "UserRepository",
]
