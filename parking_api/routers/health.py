from fastapi import APIRouter, Depends, HTTPException, status

from parking_api.core.config import settings
from parking_api.core.database import Database, get_database

router = APIRouter()


@router.get("/")
async def health_check():
    return {
        "status": "healthy",
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION
    }


@router.get("/database")
async def database_health(database: Database = Depends(get_database)):
    if not await database.ping():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection failed"
        )
    return {
        "status": "healthy",
        "service": "postgresql",
        "connected": True
    }
