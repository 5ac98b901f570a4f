from pydantic import BaseModel, ConfigDict


class TokenRequest(BaseModel):
    """Identity payload signed into the bearer token."""

    email: str

    model_config = ConfigDict(extra="allow")


class TokenData(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int
