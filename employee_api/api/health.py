from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from employee_api.db.session import get_db

router = APIRouter(tags=["health"])


@router.get("/health")
def health(db: Session = Depends(get_db)):
    # Round trip through the pool so a dead database shows up as a 500
    db.execute(text("SELECT 1"))
    return {"status": "ok", "database": db.get_bind().dialect.name}
