"""Settings, database session, errors and auth primitives shared by the API layer."""

from app.core.config import get_settings, settings
from app.core.database import get_db
from app.core.exceptions import RecipeAppError
from app.core.security import TokenService, get_token_service

__all__ = ["RecipeAppError", "TokenService", "get_db", "get_settings", "get_token_service", "settings"]
