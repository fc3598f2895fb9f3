"""HTTP routes."""

from fastapi import APIRouter

from roster.api import admin, auth, health, pages, users

router = APIRouter()
router.include_router(pages.router, tags=["pages"])
router.include_router(auth.router, tags=["auth"])
router.include_router(users.router, tags=["users"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(health.router, prefix="/health", tags=["health"])
