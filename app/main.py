from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from app.config import settings
from app.database import Database
from app.features.auth.router import router as auth_router
from app.features.bootstrap.router import router as bootstrap_router
from app.features.claims.router import router as claims_router
from app.features.clinics.router import router as clinics_router
from app.features.content.router import blog_router, products_router
from app.features.files.router import router as files_router
from app.features.newsletter.router import router as newsletter_router
from app.features.reviews.router import router as reviews_router
from app.features.submissions.router import router as submissions_router
from app.features.users.router import router as users_router
from app.routers import health_router
from app.core.logging import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for FastAPI application."""
    # Startup
    logger.info(f"Starting {settings.APP_NAME}...")
    await Database.connect_db()
    logger.info("Application started successfully")

    yield

    # Shutdown
    logger.info("Shutting down...")
    await Database.close_db()
    logger.info("Application shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description="Hair transplant clinic directory backend (in-memory simulation)",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(health_router)
app.include_router(bootstrap_router, prefix=settings.API_V1_PREFIX)
app.include_router(auth_router, prefix=settings.API_V1_PREFIX)
app.include_router(reviews_router, prefix=settings.API_V1_PREFIX)
app.include_router(claims_router, prefix=settings.API_V1_PREFIX)
app.include_router(submissions_router, prefix=settings.API_V1_PREFIX)
app.include_router(clinics_router, prefix=settings.API_V1_PREFIX)
app.include_router(blog_router, prefix=settings.API_V1_PREFIX)
app.include_router(products_router, prefix=settings.API_V1_PREFIX)
app.include_router(files_router, prefix=settings.API_V1_PREFIX)
app.include_router(users_router, prefix=settings.API_V1_PREFIX)
app.include_router(newsletter_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/health",
    }
