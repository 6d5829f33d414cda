"""
Diff Viewer Backend - FastAPI Application Entry Point
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from routers import config, diff
from services.config_manager import ConfigManager
from services.diff_service import get_diff_service
from services.errors import DiffServiceError, MalformedInput


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - startup and shutdown logic"""
    print("[Backend] Starting Diff Viewer Backend...")
    ConfigManager.get_instance()
    print("[Backend] ConfigManager initialized")

    try:
        service = get_diff_service()
    except ValueError as e:
        print(f"[Backend] Invalid configuration in {ConfigManager.get_instance().config_file}: {e}")
        raise
    print(f"[Backend] DiffService initialized (segment policy: {service.renderer.policy.value})")

    yield
    print("[Backend] Shutting down Diff Viewer Backend...")


app = FastAPI(
    title="Diff Viewer Backend",
    description="Store two versions of a text and view their line and character diff",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(diff.router, tags=["diff"])
app.include_router(config.router, prefix="/api/config", tags=["config"])


@app.exception_handler(DiffServiceError)
async def diff_service_error_handler(request: Request, exc: DiffServiceError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    error = MalformedInput()
    return JSONResponse(status_code=error.status_code, content={"detail": error.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Unknown paths and methods are both reported as a missing route
    if exc.status_code in (404, 405):
        return JSONResponse(status_code=404, content={"detail": "Route not found"})
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    print(f"[Backend] Unexpected error on {request.method} {request.url.path}: {exc!r}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "diff-viewer-backend"}


if __name__ == "__main__":
    import uvicorn

    server = ConfigManager.get_instance().get("server", {})
    uvicorn.run(app, host=server.get("host", "0.0.0.0"), port=int(server.get("port", 8000)))
