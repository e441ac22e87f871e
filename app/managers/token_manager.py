"""
Bearer token issuing and verification.

Signup and signin live in another service; this one only has to agree with
it on the token format so that a bearer credential resolves to a user id.
"""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from jose import JWTError, jwt

from app.configs import settings
from app.schemas.auth import TokenData

ACCESS_TOKEN_TYPE = "access"


def create_access_token(
    user_id: int,
    username: str,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a new access token.

    Args:
        user_id: Numeric user ID
        username: User's username
        expires_delta: Optional expiration time delta

    Returns:
        str: Encoded JWT access token
    """
    now = datetime.now(UTC)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

    to_encode = {
        "sub": username,
        "user_id": user_id,
        "jti": str(uuid4()),
        "iat": now,
        "exp": expire,
        "iss": settings.JWT_ISSUER,
        "aud": settings.JWT_AUDIENCE,
        "type": ACCESS_TOKEN_TYPE,
    }

    return jwt.encode(
        to_encode,
        settings.SECRET_KEY.get_secret_value(),
        algorithm=settings.ALGORITHM,
    )


def decode_access_token(token: str) -> TokenData | None:
    """
    Decode and validate an access token.

    Signature, expiry, issuer and audience are all checked; a token missing
    any claim, or carrying a non-integer ``user_id``, is rejected.

    Args:
        token: JWT token string

    Returns:
        TokenData | None: Decoded token data or None if invalid
    """
    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY.get_secret_value(),
            algorithms=[settings.ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            issuer=settings.JWT_ISSUER,
        )
    except JWTError:
        return None

    username: str | None = payload.get("sub")
    user_id = payload.get("user_id")
    jti: str | None = payload.get("jti")
    token_type: str | None = payload.get("type")

    if not username or not jti or token_type != ACCESS_TOKEN_TYPE:
        return None
    # bool is an int subclass
    if not isinstance(user_id, int) or isinstance(user_id, bool) or user_id < 1:
        return None

    return TokenData(username=username, user_id=user_id, jti=jti, token_type=token_type)
