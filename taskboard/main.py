# taskboard/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from taskboard import models  # noqa: F401  (registers tables on Base.metadata)
from taskboard.config.logging import setup_logging
from taskboard.config.settings import Settings
from taskboard.database import Base, SessionLocal, engine
from taskboard.exception_handlers import register_exception_handlers
from taskboard.routers import admin, auth, employee, task, user
from taskboard.services.bootstrap import seed_admin_user

logger = logging.getLogger(__name__)

app = FastAPI(title="Task Manager API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=Settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Route registration
app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])
app.include_router(user.router, prefix="/api/users", tags=["Users"])
app.include_router(admin.router, prefix="/api/admin", tags=["Admin"])
app.include_router(employee.router, prefix="/api/employees", tags=["Employees"])
app.include_router(task.router, prefix="/api/tasks", tags=["Tasks"])


@app.on_event("startup")
def startup_event():
    """Create tables and seed the default admin once per process"""
    setup_logging()
    logger.info("Starting Task Manager API...")
    Base.metadata.create_all(bind=engine)
    if Settings.SEED_ADMIN:
        db = SessionLocal()
        try:
            seed_admin_user(db)
        finally:
            db.close()


@app.get("/")
def read_root():
    return {"message": "Task Manager API"}


@app.get("/health")
def health():
    return {"status": "ok"}
