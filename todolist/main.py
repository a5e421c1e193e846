import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from .config import settings
from .database import Base, engine, SessionLocal
from .exceptions import TaskValidationError, TodoListError
from . import models
from .routes import tasks
from .routes.auth import router as auth_router
from .seed import seed_demo_data

cfg = settings()

logging.basicConfig(
    level=cfg.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Auto-create tables for all models imported above
    Base.metadata.create_all(bind=engine)
    if cfg.SEED_DEMO_DATA:
        db = SessionLocal()
        try:
            seed_demo_data(db)
        finally:
            db.close()
    yield

app = FastAPI(title="todolist-api", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cfg.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(TaskValidationError)
async def task_validation_handler(request: Request, exc: TaskValidationError):
    logger.info("Rejected task payload on %s: %s", request.url.path, exc.context)
    return JSONResponse(status_code=400, content={"detail": [exc.as_detail()]})

@app.exception_handler(TodoListError)
async def todolist_error_handler(request: Request, exc: TodoListError):
    logger.error("%s on %s: %s", type(exc).__name__, request.url.path, exc.context)
    return JSONResponse(status_code=500, content={"detail": exc.message})

@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # Internal details stay in the log, never in the response
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})

@app.get("/health")
def health():
    return {"status": "ok"}

app.include_router(auth_router)
app.include_router(tasks.router)
