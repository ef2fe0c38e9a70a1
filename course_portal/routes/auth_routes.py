import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from course_portal.auth import jwt_handler
from course_portal.auth.passwords import hash_password, verify_password
from course_portal.core.errors import ApiError, internal_error
from course_portal.database import get_db
from course_portal.models.user import User
from course_portal.schemas import AuthResponse, LoginRequest, RegisterRequest, UserPublic

router = APIRouter(tags=['auth'])

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = 'The user already exist'
USER_NOT_FOUND_MESSAGE = 'User do not exist'
INVALID_CREDENTIALS_MESSAGE = 'Email or password is invalid.'


def user_exists_error(email: str) -> ApiError:
    return ApiError(status.HTTP_409_CONFLICT, USER_EXISTS_MESSAGE, email=email)


def build_auth_response(user: User) -> AuthResponse:
    access_token = jwt_handler.create_access_token(jwt_handler.build_token_claims(user))
    return AuthResponse(user=UserPublic.model_validate(user), access_token=access_token)


@router.post('/register', response_model=AuthResponse)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    try:
        # Fast path only; the unique index on users.email decides races.
        if db.query(User.id).filter(User.email == data.email).first():
            logger.warning('Registration rejected, email already in use: %s', data.email)
            raise user_exists_error(data.email)

        new_user = User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            password=hash_password(data.password),
            refresh_token='',
            avatar='',
            address='',
            phone_number='',
            region='',
        )
        db.add(new_user)
        db.commit()
        db.refresh(new_user)
    except IntegrityError as exc:
        db.rollback()
        logger.warning('Registration lost a race on email %s', data.email)
        raise user_exists_error(data.email) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Could not save user %s', data.email)
        raise internal_error() from exc

    logger.info('Registered user %s', new_user.id)
    return build_auth_response(new_user)


@router.post('/login', response_model=AuthResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    try:
        user = db.query(User).filter(User.email == data.email).first()
    except SQLAlchemyError as exc:
        logger.exception('Could not load user %s', data.email)
        raise internal_error() from exc

    if user is None:
        logger.warning('Login failed, unknown email: %s', data.email)
        raise ApiError(status.HTTP_400_BAD_REQUEST, USER_NOT_FOUND_MESSAGE)

    if not verify_password(data.password, user.password):
        logger.warning('Login failed, bad password for user %s', user.id)
        raise ApiError(status.HTTP_401_UNAUTHORIZED, INVALID_CREDENTIALS_MESSAGE)

    logger.info('User %s logged in', user.id)
    return build_auth_response(user)
