from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/")
def root(request: Request):
    """Service index: where to find docs, health and the employee endpoints."""
    endpoints = sorted(
        {route.path for route in request.app.routes if route.path.startswith("/employee")}
    )
    return {
        "name": "Employee API",
        "status": "ok",
        "docs": request.app.docs_url,
        "health": "/health",
        "endpoints": endpoints,
    }
