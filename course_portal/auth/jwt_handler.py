from datetime import datetime, timedelta, timezone

import jwt

from course_portal.core import config
from course_portal.models.user import User

# Only non-sensitive identity fields go into the token.
TOKEN_CLAIM_KEYS = ("_id", "firstName", "lastName", "email", "isAdmin", "isInstructor")


def build_token_claims(user: User) -> dict:
    return {
        "_id": user.id,
        "firstName": user.first_name,
        "lastName": user.last_name,
        "email": user.email,
        "isAdmin": bool(user.is_admin),
        "isInstructor": bool(user.is_instructor),
    }


def create_access_token(claims: dict, expires_hours: int | None = None) -> str:
    expire_hours = expires_hours or config.ACCESS_TOKEN_EXPIRES_HOURS
    issued_at = datetime.now(timezone.utc)
    payload = {key: claims[key] for key in TOKEN_CLAIM_KEYS}
    payload.update({"iat": issued_at, "exp": issued_at + timedelta(hours=expire_hours)})
    return jwt.encode(payload, config.ACCESS_TOKEN_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict:
    return jwt.decode(
        token,
        config.ACCESS_TOKEN_SECRET,
        algorithms=[config.JWT_ALGORITHM],
        options={"require": ["exp"]},
    )
