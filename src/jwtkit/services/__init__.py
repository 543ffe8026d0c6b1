from jwtkit.services.token_service import AuthUser, TokenService

__all__ = ["AuthUser", "TokenService"]
