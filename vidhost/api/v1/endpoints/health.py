"""
Health check endpoints
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vidhost.core.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/")
async def health_check():
    return {"status": "healthy"}


@router.get("/detailed")
def detailed_health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        database = "connected"
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        database = "unavailable"

    return {
        "status": "healthy" if database == "connected" else "degraded",
        "database": database,
    }
