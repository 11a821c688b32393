import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.middleware.sessions import SessionMiddleware

from .config import settings
from .database import init_db, dispose_engine
from .errors import PersistenceError, ValidationError
from .routes.artwork import router as artwork_router
from .routes.bgcolor import router as bgcolor_router
from .routes.font import router as font_router
from .routes.fontcolor import router as fontcolor_router
from .routes.order import router as order_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

DB_ERROR_MESSAGE = "데이터베이스 오류 발생"
BAD_REQUEST_MESSAGE = "잘못된 요청 - 요청 형식이 올바르지 않습니다."


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: schema is created/synchronized here, no migrations.
    # init_db blocks (retries with sleep), keep it off the event loop
    await run_in_threadpool(init_db)
    yield
    # Shutdown
    dispose_engine()


async def validation_error_handler(request: Request, exc: ValidationError):
    logger.info("rejected %s %s: missing %s", request.method, request.url.path, ", ".join(exc.fields))
    return JSONResponse(status_code=400, content={"message": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": BAD_REQUEST_MESSAGE})


async def persistence_error_handler(request: Request, exc: PersistenceError):
    # details were logged by the repository; the client only gets the fixed message
    logger.error("%s %s -> 500 (%s on %s)", request.method, request.url.path, exc.operation, exc.entity)
    return JSONResponse(status_code=500, content={"message": DB_ERROR_MESSAGE})


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.app_title,
        description="Artwork, colors, fonts and custom case orders",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api-docs",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.session_secret,
        max_age=settings.session_max_age,
    )

    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(PersistenceError, persistence_error_handler)

    @app.get("/health", tags=["health"])
    def health():
        return {"status": "ok"}

    app.include_router(artwork_router)
    app.include_router(bgcolor_router)
    app.include_router(font_router)
    app.include_router(fontcolor_router)
    app.include_router(order_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
