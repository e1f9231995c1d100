import logging

from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .config import settings
from .database import SessionLocal
from .routers import availabilities

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Availabilities API")

app.include_router(availabilities.router)


@app.get("/health")
def health():
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        return {"database": True}
    except SQLAlchemyError:
        logger.exception("Database health check failed")
        return {"database": False}
    finally:
        db.close()
