# skillboard/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skillboard import __version__
from skillboard.api import auth, skill, users
from skillboard.config import settings
from skillboard.database import Base, engine

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Create database tables (alembic owns migrations for real deployments)
Base.metadata.create_all(bind=engine)

# Initialize FastAPI app
app = FastAPI(title="SkillBoard API", version=__version__)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routers
app.include_router(auth.router)    # /auth/*
app.include_router(users.router)   # /users/*
app.include_router(skill.router)   # /skills/*


@app.get("/health")
def health_check():
    return {
        "status": "healthy",
        "message": "SkillBoard API is running",
        "version": __version__,
    }
