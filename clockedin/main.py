from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from clockedin.api import auth, meetings
from clockedin.config import settings
from clockedin.core.errors import ClockedInError
from clockedin.core.state import AppState
from clockedin.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(state: AppState | None = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        app.state.clockedin.start()
        try:
            yield
        finally:
            app.state.clockedin.shutdown()

    app = FastAPI(title="ClockedIn", lifespan=lifespan)
    app.state.clockedin = state or AppState()
    config = app.state.clockedin.settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization"],
    )

    @app.exception_handler(ClockedInError)
    async def clockedin_error_handler(request: Request, exc: ClockedInError) -> JSONResponse:
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = [err.get("msg") for err in exc.errors()]
        return JSONResponse(status_code=400, content={"error": "Invalid input", "details": messages})

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled error on %s: %s", request.url.path, exc, exc_info=exc)
        return JSONResponse(status_code=500, content={"error": "Something broke!"})

    @app.get("/ping")
    async def ping():
        return {"message": "pong"}

    app.include_router(auth.router)
    app.include_router(meetings.router)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
