from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError
from fastapi import HTTPException, status
from typing import Optional
from core.config import settings
import logging

logger = logging.getLogger(__name__)

client: Optional[MongoClient] = None
db: Optional[Database] = None

def init_db():
    global client, db
    if not settings.MONGODB_URI:
        logger.error(
            "❌ MONGODB_URI is empty! "
            f"Check that your .env file exists and is readable. "
            f"Expected .env path: {settings.model_config.get('env_file', 'unknown')}"
        )
        return
    try:
        client = MongoClient(settings.MONGODB_URI, serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS)
        db = client[settings.DB_NAME]
        logger.info(f"✅ MongoDB client initialized (database: {settings.DB_NAME})")
    except PyMongoError as e:
        logger.error(f"❌ Could not initialize MongoDB client: {e}")

def close_db():
    global client, db
    if client is not None:
        client.close()
        logger.info("MongoDB client closed")
    client = None
    db = None

def get_database() -> Database:
    if db is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Database not configured"
        )
    return db

def ping_db() -> bool:
    """Round-trip to the server; False when unreachable or not configured"""
    if db is None:
        return False
    try:
        db.command("ping")
        return True
    except PyMongoError as e:
        logger.warning(f"⚠️ MongoDB ping failed: {e}")
        return False
