from .config import settings
from .exceptions import ConflictError, ExploreError, NotFoundError, ValidationError

__all__ = [
    "settings",
    "ConflictError",
    "ExploreError",
    "NotFoundError",
    "ValidationError",
]
