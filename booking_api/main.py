import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from booking_api.core import config
from booking_api.core.logging import setup_logging
from booking_api.database import Base, engine, ensure_booking_schema
from booking_api.models import booking, patient  # noqa: F401
from booking_api.routes import booking_routes

setup_logging()
config.validate_runtime_config()

app = FastAPI(title='Patient Booking API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    try:
        Base.metadata.create_all(bind=engine)
        ensure_booking_schema()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')


@app.get('/')
def root():
    return {'status': 'Patient Booking API Running'}


app.include_router(booking_routes.router, prefix='/api/booking')
