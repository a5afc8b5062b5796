"""Bodies returned by the bearer-token guard."""

from pydantic import BaseModel, Field


class AuthError(BaseModel):
    """Detail of a 401 raised before a protected route runs."""

    detail: str = Field(..., description="Human-readable reason")
    error: str = Field(
        ..., description="Machine-readable code: missing_auth_header or invalid_token"
    )
    environment: str = Field(..., description="Environment the API runs in")
