# storefront/api/routers/health.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from storefront.data.database import get_db, check_connection

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    database = check_connection(db)
    return {"status": "ok" if database else "degraded", "database": database}
