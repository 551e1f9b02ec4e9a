from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from dotenv import load_dotenv
from app.database import init_db
from app.exceptions import (
    PersistenceError,
    http_exception_handler,
    validation_exception_handler,
    persistence_error_handler,
    general_exception_handler,
)
from app.middleware import SecurityHeadersMiddleware, RequestLoggingMiddleware
from app.routes import auth, movies
import os
import logging

# Load environment variables
load_dotenv()

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: ensure tables exist and check the signing secret is configured.
    """
    logger.info("Movie Catalog API starting")
    logger.info(f"   Environment: {os.getenv('ENVIRONMENT', 'development')}")
    if not os.getenv("SECRET_KEY"):
        logger.error("SECRET_KEY is not set; every authenticated request will fail")

    try:
        init_db()
    except Exception as e:
        logger.error(f"Failed to initialise database: {str(e)}")

    yield

    logger.info("Movie Catalog API shutting down")


app = FastAPI(
    title="Movie Catalog API",
    description="Movies, cast and reviews behind cookie-based session tokens",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# ============================================
# Middleware
# ============================================

allowed_origins = [
    "http://localhost:3000",
    "http://localhost:5173",
]
if production_url := os.getenv("FRONTEND_URL"):
    allowed_origins.append(production_url)

app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,  # The session travels as a cookie
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

# ============================================
# Exception Handlers - every error body is {"message": ...}
# ============================================

app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(PersistenceError, persistence_error_handler)
app.add_exception_handler(Exception, general_exception_handler)

# ============================================
# Routes
# ============================================

@app.get("/", tags=["Health"])
async def root():
    """Basic health check"""
    return {
        "message": "Movie Catalog API",
        "version": "1.0.0",
        "docs": "/docs"
    }

@app.get("/health", tags=["Health"])
async def health_check():
    return {"status": "healthy"}

app.include_router(auth.router)
app.include_router(movies.router)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=int(os.getenv("PORT", 3000)),
        log_level="info"
    )
