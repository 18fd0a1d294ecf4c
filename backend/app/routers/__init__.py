"""Caelex Compliance Engine - API Routers"""
from .assessments import router as assessments_router
from .catalog import router as catalog_router
from .crosswalk import router as crosswalk_router
from .calculators import router as calculators_router

__all__ = [
    "assessments_router",
    "catalog_router",
    "crosswalk_router",
    "calculators_router",
]
