"""
FastAPI application entry point
"""
import os
import logging
from pathlib import Path
from dotenv import load_dotenv

logging.basicConfig(level=logging.INFO)
logging.getLogger("catalog").setLevel(logging.INFO)
logging.getLogger("database").setLevel(logging.INFO)

# Load environment variables FIRST, before any other imports
# Explicitly look for .env in the backend directory (parent of app/)
backend_dir = Path(__file__).parent.parent
env_path = backend_dir / ".env"
load_dotenv(dotenv_path=env_path, override=True)

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.routes import products


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle — make sure the product table exists."""
    from app.services.database import init_db, close_db

    await init_db()
    yield
    await close_db()


app = FastAPI(
    title="Product Catalog API",
    description="Read-only product catalog backed by a relational table",
    version="1.0.0",
    lifespan=lifespan,
)

cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:3001")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in cors_origins.split(",") if o.strip()],
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Include routers
app.include_router(products.router, tags=["products"])


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok", "service": "product-catalog-api"}
