"""API v1 routes."""

from fastapi import APIRouter

from portal.api.v1 import accounts, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(accounts.router, tags=["accounts"])
