from jwtkit.models.auth import AuthTokenRequest, AuthTokenResponse, TokenIntrospectionResponse

__all__ = ["AuthTokenRequest", "AuthTokenResponse", "TokenIntrospectionResponse"]
