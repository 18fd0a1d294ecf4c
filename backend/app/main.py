"""
Caelex Compliance Engine - FastAPI Application

Main entry point for the compliance engine backend.

Architecture:
- OperatorProfile → Applicability Resolver → applicable requirements
- applicable requirements + RequirementStatus rows → Scoring Engine
- Scoring Engine → score / risk level / gap list
- Crosswalk → overlap between frameworks
"""
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import assessments_router, catalog_router, crosswalk_router, calculators_router
from .database import init_db
from .services.catalog import CATALOG_VERSION
from .services.compliance import ExpiringCache

# Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
RESULT_CACHE_TTL_SECONDS = float(os.getenv("RESULT_CACHE_TTL_SECONDS", "300"))
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database on startup."""
    init_db()
    logger.info(f"Compliance engine started (catalog {CATALOG_VERSION})")
    yield

# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title="Caelex Compliance Engine",
    description="""
    Caelex Compliance Engine - Space Regulatory Compliance

    Resolves which regulatory requirements bind a space operator and scores
    its compliance across the EU Space Act, NIS2, the UK Space Industry Act
    and US federal rules (FCC, FAA, NOAA).

    ## Pipeline
    1. **Applicability Resolver**: OperatorProfile → applicable requirements
    2. **Status Store**: per-requirement compliant / partial / non_compliant / not_assessed
    3. **Scoring Engine**: weighted score, risk level, prioritized gap list
    4. **Crosswalk**: implementation overlap between frameworks

    ## Key Principles
    - Requirement catalogs are static reference data
    - The applicable set is recomputed from the profile, never stored
    - Scores are recomputed on every mutation and stamped with the catalog version
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Result cache, owned by the app and injected into services
app.state.results_cache = ExpiringCache(ttl_seconds=RESULT_CACHE_TTL_SECONDS)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(catalog_router)
app.include_router(assessments_router)
app.include_router(crosswalk_router)
app.include_router(calculators_router)


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Caelex Compliance Engine",
        "version": "1.0.0",
        "catalog_version": CATALOG_VERSION,
        "docs": "/docs",
        "jurisdictions": ["eu_space_act", "nis2", "uk_sia", "us"],
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


# For running with: python -m app.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)
