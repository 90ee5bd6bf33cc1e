"""Schemas for like/unlike endpoints."""

from pydantic import BaseModel, Field


class LikeStatusResponse(BaseModel):
    liked: bool = Field(..., description="Whether the caller has liked the recipe")


class MessageResponse(BaseModel):
    message: str
