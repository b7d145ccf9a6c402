"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for every failed request."""

    success: bool = Field(default=False)
    error: str = Field(
        ...,
        description="Error category derived from the HTTP status",
        examples=["Unauthorized", "Conflict", "Not Found"],
    )
    message: str = Field(
        ...,
        description="Human-readable detail",
        examples=["Access Token is missing", "This username is already taken"],
    )
    error_code: str = Field(
        ...,
        description="Machine-readable error code for client-side error handling",
        examples=["TOKEN_MISSING", "USER_ALREADY_EXISTS"],
    )


class ValidationErrorResponse(ErrorResponse):
    """Model for the 400 validation error response.

    Only the first failing field is reported. ``path`` lists the location
    innermost segment first, joined with dots.
    """

    path: str = Field(
        ...,
        description="Location of the failing field, innermost segment first",
        examples=["username", "first.name", "2.preferences"],
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": False,
                "error": "Bad Request",
                "message": "first-name cannot be empty",
                "error_code": "VALIDATION_ERROR",
                "path": "first.name",
            }
        }
    }
