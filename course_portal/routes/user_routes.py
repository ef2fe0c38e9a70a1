import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from course_portal.auth.dependencies import TokenIdentity, get_current_identity
from course_portal.core.errors import ApiError, internal_error
from course_portal.database import get_db
from course_portal.models.user import User
from course_portal.routes.auth_routes import USER_NOT_FOUND_MESSAGE
from course_portal.schemas import AccountResponse, AccountUser

router = APIRouter(tags=['users'])

logger = logging.getLogger(__name__)


@router.get('/my-account', response_model=AccountResponse)
def my_account(
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    try:
        user = db.get(User, identity.id)
    except SQLAlchemyError as exc:
        logger.exception('Could not load account %s', identity.id)
        raise internal_error() from exc

    if user is None:
        raise ApiError(status.HTTP_400_BAD_REQUEST, USER_NOT_FOUND_MESSAGE)

    return AccountResponse(user=AccountUser.model_validate(user))
