from __future__ import annotations

import logging
from typing import Optional, Sequence

from app.core.exceptions import ConflictError, NotFoundError
from app.models import User
from app.repositories import EventRepository, RequestRepository, UserRepository
from app.schemas import UserCreate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(
        self,
        users: UserRepository,
        events: EventRepository,
        requests: RequestRepository,
    ) -> None:
        self.users = users
        self.events = events
        self.requests = requests

    def create(self, payload: UserCreate) -> User:
        email = payload.email.lower()
        if self.users.get_by_email(email) is not None:
            raise ConflictError(f"User with email '{email}' already exists.")
        user = self.users.save(User(name=payload.name, email=email))
        logger.info(f"User {user.id} created")
        return user

    def list(
        self, ids: Optional[Sequence[int]] = None, offset: int = 0, size: int = 10
    ) -> list[User]:
        return self.users.find_page(ids, offset, size)

    def delete(self, user_id: int) -> None:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError(f"User with id = {user_id} was not found.")
        # Events and requests keep a reference to their user
        if self.events.exists_with_initiator(user_id):
            raise ConflictError(f"User with id = {user_id} still initiates events.")
        if self.requests.exists_by_requester(user_id):
            raise ConflictError(f"User with id = {user_id} still has participation requests.")
        self.users.delete(user)
        logger.info(f"User {user_id} deleted")
