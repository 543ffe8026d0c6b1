from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class AuthTokenRequest(BaseModel):
    username: str
    password: str


class AuthTokenResponse(BaseModel):
    access_token: str = Field(alias="accessToken")
    token_type: str = Field(default="bearer", alias="tokenType")
    expires_in_seconds: int = Field(alias="expiresInSeconds")


class TokenIntrospectionResponse(BaseModel):
    subject: str
    algorithm: str
    header: dict[str, Any]
    claims: dict[str, Any]
