"""API v1 routes."""

from fastapi import APIRouter

from app.api.v1 import auth, health, likes, recipes, reviews, users

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(recipes.router, prefix="/recipes", tags=["recipes"])
router.include_router(reviews.router, prefix="/recipes", tags=["reviews"])
router.include_router(likes.router, prefix="/recipes", tags=["likes"])
