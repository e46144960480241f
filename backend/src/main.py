import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from shared.config import Settings, settings as default_settings
from shared.exceptions import STATUS_CODES, AppError, ErrorKind
from shared.infrastructure.database import Database
from shared.logging_setup import configure_logging
from users.interfaces.routes import router as users_router


def error_response(kind: ErrorKind, request_id: str | None = None) -> JSONResponse:
    headers = {"X-Request-ID": request_id} if request_id else None
    return JSONResponse(
        status_code=STATUS_CODES[kind],
        content={"success": False, "error": kind.value},
        headers=headers,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database = Database(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)
        await database.create_schema()
        app.state.database = database
        logger.info("Database ready at {}", database.engine.url.render_as_string())
        yield
        await database.dispose()

    app = FastAPI(
        title="User Registry",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start = time.perf_counter()

        with logger.contextualize(request_id=request_id):
            logger.bind(method=request.method, path=request.url.path).info("request.start")
            try:
                response = await call_next(request)
            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                logger.bind(
                    status_code=500,
                    duration_ms=round(duration_ms, 1),
                    error_type=type(exc).__name__,
                ).exception("request.error")
                return error_response(ErrorKind.SERVER_ERROR, request_id)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")
            response.headers.setdefault("X-Request-ID", request_id)
            return response

    # outermost layer: ServerError responses carry CORS headers too
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(AppError)
    async def app_error_handler(request, exc: AppError):
        return error_response(exc.kind)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request, exc: RequestValidationError):
        logger.bind(errors=len(exc.errors())).info("request.malformed")
        return error_response(ErrorKind.VALIDATION_ERROR)

    @app.get("/health")
    async def health_check():
        return {"status": "ok"}

    app.include_router(users_router)
    return app


app = create_app()
