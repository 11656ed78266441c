from __future__ import annotations

from typing import List

from fastapi import APIRouter, Query, Response, status

from app.api.deps import CategoryServiceDep
from app.schemas import CategoryCreate, CategoryRead

router = APIRouter()
admin_router = APIRouter()


@router.get("", response_model=List[CategoryRead], summary="List categories")
def list_categories(
    categories: CategoryServiceDep,
    offset: int = Query(default=0, ge=0, alias="from"),
    size: int = Query(default=10, gt=0),
) -> List[CategoryRead]:
    return [CategoryRead.model_validate(c) for c in categories.list(offset, size)]


@router.get("/{category_id}", response_model=CategoryRead, summary="Get category by id")
def get_category(category_id: int, categories: CategoryServiceDep) -> CategoryRead:
    return CategoryRead.model_validate(categories.get(category_id))


@admin_router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
)
def create_category(payload: CategoryCreate, categories: CategoryServiceDep) -> CategoryRead:
    return CategoryRead.model_validate(categories.create(payload))


@admin_router.patch("/{category_id}", response_model=CategoryRead, summary="Rename category")
def update_category(
    category_id: int, payload: CategoryCreate, categories: CategoryServiceDep
) -> CategoryRead:
    return CategoryRead.model_validate(categories.update(category_id, payload))


@admin_router.delete(
    "/{category_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete category"
)
def delete_category(category_id: int, categories: CategoryServiceDep) -> Response:
    categories.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
