import logging

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from course_portal.auth import jwt_handler

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


class TokenIdentity(BaseModel):
    """Identity claims attached to an authenticated request."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    is_admin: bool = Field(default=False, alias="isAdmin")
    is_instructor: bool = Field(default=False, alias="isInstructor")


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> TokenIdentity:
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized("Access token not found")

    try:
        payload = jwt_handler.decode_access_token(credentials.credentials)
    except jwt.PyJWTError as exc:
        logger.warning("Rejected access token: %s", exc)
        raise _unauthorized("Invalid token") from exc

    try:
        return TokenIdentity.model_validate(payload)
    except ValidationError as exc:
        raise _unauthorized("Invalid token payload") from exc
