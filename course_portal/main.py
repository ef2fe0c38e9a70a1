import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from course_portal.core import config
from course_portal.core.errors import install_error_handlers
from course_portal.database import connect
from course_portal.routes import auth_routes, class_routes, user_routes


def configure_logging() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


configure_logging()

app = FastAPI(title='Course Portal API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

install_error_handlers(app)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    if not connect():
        logger.error('Starting without a database; requests will fail until it is reachable.')


@app.get('/')
def root():
    return {'status': 'Course Portal API Running'}


app.include_router(auth_routes.router, prefix='/api/auth')
app.include_router(user_routes.router, prefix='/api/users')
app.include_router(class_routes.router, prefix='/api/classes')
