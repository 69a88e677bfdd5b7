import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config.settings import settings
from app.database import init_db
from app.routers import auth, profile, tasks, user
from app.utils.responses import failure

logging.basicConfig(
    level=settings.SERVER["log_level"],
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("taskini")

app = FastAPI(title="Taskini API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.SERVER["cors_origins"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Every failure leaves the API as {success: false, message}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return failure(exc.status_code, message, headers=getattr(exc, "headers", None))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        problems.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))
    return failure(400, "; ".join(problems) or "Invalid request")


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return failure(500, "Server error")


# Route registration
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(tasks.router, prefix="/api/tasks", tags=["Tasks"])
app.include_router(profile.router, prefix="/api/profile", tags=["Profile"])
app.include_router(user.router, prefix="/api/users", tags=["Users"])

# Uploaded profile photos
app.mount(
    "/uploads",
    StaticFiles(directory=settings.UPLOADS["upload_dir"], check_dir=False),
    name="uploads",
)


@app.on_event("startup")
async def startup_event():
    """Create missing tables and the upload directory"""
    init_db()
    Path(settings.UPLOADS["upload_dir"]).mkdir(parents=True, exist_ok=True)
    logger.info("Taskini API started")


@app.get("/api/health")
def health():
    return {"message": "Server is running"}
