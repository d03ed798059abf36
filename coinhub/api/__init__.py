"""API routes."""

from fastapi import APIRouter

from coinhub.api.routes import admin, auth, health, maintenance, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/user", tags=["user"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(maintenance.router, prefix="/maintenance", tags=["maintenance"])
