from __future__ import annotations

import logging

from app.core.exceptions import ConflictError, NotFoundError
from app.models import Category
from app.repositories import CategoryRepository, EventRepository
from app.schemas import CategoryCreate

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, categories: CategoryRepository, events: EventRepository) -> None:
        self.categories = categories
        self.events = events

    def create(self, payload: CategoryCreate) -> Category:
        if self.categories.get_by_name(payload.name) is not None:
            raise ConflictError(f"Category with name '{payload.name}' already exists.")
        category = self.categories.save(Category(name=payload.name))
        logger.info(f"Category {category.id} created: {category.name}")
        return category

    def update(self, category_id: int, payload: CategoryCreate) -> Category:
        category = self.get(category_id)
        existing = self.categories.get_by_name(payload.name)
        if existing is not None and existing.id != category_id:
            raise ConflictError(f"Category with name '{payload.name}' already exists.")
        category.name = payload.name
        return self.categories.save(category)

    def delete(self, category_id: int) -> None:
        category = self.get(category_id)
        if self.events.exists_with_category(category_id):
            raise ConflictError("The category is not empty.")
        self.categories.delete(category)
        logger.info(f"Category {category_id} deleted")

    def get(self, category_id: int) -> Category:
        category = self.categories.get(category_id)
        if category is None:
            raise NotFoundError(f"Category with id = {category_id} was not found.")
        return category

    def list(self, offset: int = 0, size: int = 10) -> list[Category]:
        return self.categories.find_page(offset, size)
