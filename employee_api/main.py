import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from employee_api.api.employees import router as employees_router
from employee_api.api.health import router as health_router
from employee_api.api.reports import router as reports_router
from employee_api.api.root import router as root_router
from employee_api.core.config import settings
from employee_api.core.errors import register_exception_handlers
from employee_api.core.logging_config import configure_logging
from employee_api.db.session import check_connection

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    check_connection()
    yield


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Employee API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.cors_origins_list != ["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(root_router)
    app.include_router(health_router)
    # Fixed report paths are registered before the /employee/{email} routes
    app.include_router(reports_router)
    app.include_router(employees_router)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured port."""
    import uvicorn

    logger.info("Server is running on port %s", settings.PORT)
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
