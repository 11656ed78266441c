from fastapi import APIRouter

from app.api.v1 import categories, events, health, participation_requests, stats, user_events, users


api_router = APIRouter()
api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(stats.router, tags=["stats"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(categories.admin_router, prefix="/admin/categories", tags=["admin"])
api_router.include_router(users.router, prefix="/admin/users", tags=["admin"])
api_router.include_router(events.admin_router, prefix="/admin/events", tags=["admin"])
api_router.include_router(events.router, prefix="/events", tags=["events"])
api_router.include_router(user_events.router, prefix="/users", tags=["user-events"])
api_router.include_router(participation_requests.router, prefix="/users", tags=["requests"])
