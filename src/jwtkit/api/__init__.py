from jwtkit.api.dependencies import get_token_service, require_api_user
from jwtkit.api.routes import router

__all__ = ["get_token_service", "require_api_user", "router"]
