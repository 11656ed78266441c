from __future__ import annotations

from typing import Optional, Sequence

from sqlmodel import Session, select

from app.models import User


class UserRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def exists(self, user_id: int) -> bool:
        return self.get(user_id) is not None

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(select(User).where(User.email == email)).first()

    def find_page(
        self, ids: Optional[Sequence[int]] = None, offset: int = 0, limit: int = 10
    ) -> list[User]:
        statement = select(User)
        if ids:
            statement = statement.where(User.id.in_(ids))
        statement = statement.order_by(User.id).offset(offset).limit(limit)
        return list(self.session.exec(statement).all())

    def get_many(self, ids: Sequence[int]) -> dict[int, User]:
        if not ids:
            return {}
        users = self.session.exec(select(User).where(User.id.in_(ids))).all()
        return {user.id: user for user in users}

    def save(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def delete(self, user: User) -> None:
        self.session.delete(user)
        self.session.commit()
