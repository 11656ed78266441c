from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from app.api.deps import UserServiceDep
from app.schemas import UserCreate, UserRead

router = APIRouter()


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(payload: UserCreate, users: UserServiceDep) -> UserRead:
    return UserRead.model_validate(users.create(payload))


@router.get("", response_model=List[UserRead], summary="List users")
def list_users(
    users: UserServiceDep,
    ids: Optional[List[int]] = Query(default=None),
    offset: int = Query(default=0, ge=0, alias="from"),
    size: int = Query(default=10, gt=0),
) -> List[UserRead]:
    return [UserRead.model_validate(u) for u in users.list(ids, offset, size)]


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete user")
def delete_user(user_id: int, users: UserServiceDep) -> Response:
    users.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
