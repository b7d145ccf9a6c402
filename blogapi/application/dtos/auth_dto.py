"""Authentication DTOs for the application layer."""

from pydantic import BaseModel, ConfigDict, Field

from blogapi.application.dtos.fields import Email, Password


class LoginDTO(BaseModel):
    """DTO for user login request."""

    email: Email
    password: Password

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "email": "ada@example.com",
                    "password": "secret1",
                }
            ]
        }
    )


class TokenDTO(BaseModel):
    """Issued session token together with the user it belongs to."""

    token: str = Field(..., description="Signed bearer token")
    user_id: str = Field(..., description="Identifier embedded in the token")
