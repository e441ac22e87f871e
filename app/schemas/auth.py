from pydantic import BaseModel


class TokenData(BaseModel):
    """Verified claims of an access token."""

    username: str
    user_id: int
    jti: str
    token_type: str = "access"
