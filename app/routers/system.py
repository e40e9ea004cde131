"""
System endpoints mounted under /api.
"""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.database import engine, get_db

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])


@router.get("/db-status")
def db_status(db: Session = Depends(get_db)):
    """
    Report whether the database answers a trivial query.

    Always returns 200; a failed connection is reported in the body.
    """
    timestamp = datetime.now(timezone.utc).isoformat()
    try:
        db.execute(text("SELECT 1"))
        return {
            "connection_state": "connected",
            "database": engine.url.database,
            "dialect": engine.dialect.name,
            "timestamp": timestamp,
        }
    except Exception as e:
        logger.error(f"Database status check failed: {str(e)}")
        return {
            "connection_state": "disconnected",
            "error": str(e),
            "timestamp": timestamp,
        }
