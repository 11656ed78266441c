from __future__ import annotations

from typing import Optional, Sequence

from sqlmodel import Session, select

from app.models import Category


class CategoryRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, category_id: int) -> Optional[Category]:
        return self.session.get(Category, category_id)

    def get_by_name(self, name: str) -> Optional[Category]:
        return self.session.exec(select(Category).where(Category.name == name)).first()

    def find_page(self, offset: int = 0, limit: int = 10) -> list[Category]:
        statement = select(Category).order_by(Category.id).offset(offset).limit(limit)
        return list(self.session.exec(statement).all())

    def get_many(self, ids: Sequence[int]) -> dict[int, Category]:
        if not ids:
            return {}
        categories = self.session.exec(select(Category).where(Category.id.in_(ids))).all()
        return {category.id: category for category in categories}

    def save(self, category: Category) -> Category:
        self.session.add(category)
        self.session.commit()
        self.session.refresh(category)
        return category

    def delete(self, category: Category) -> None:
        self.session.delete(category)
        self.session.commit()
