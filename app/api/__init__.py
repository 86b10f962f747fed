"""API router for v1 endpoints."""

from fastapi import APIRouter

from app.api import path_recommendation

router = APIRouter()

# Transformation path recommendation routes
router.include_router(path_recommendation.router, tags=["path_recommendation"])
