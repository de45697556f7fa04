from datetime import datetime, timezone
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession
from framework.config import settings
from framework.database.manager import get_db
from framework.response import ResponseModel

router = APIRouter()


@router.get("/health")
async def health():
    """Liveness probe; never touches the database."""
    return ResponseModel.success(data={
        "status": "healthy",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    })


@router.get("/ready")
async def ready(db: AsyncSession = Depends(get_db)):
    """Readiness probe; database errors go to the global handler."""
    result = await db.exec(text("SELECT 1"))
    return ResponseModel.success(data={"database": result.scalar() == 1})
