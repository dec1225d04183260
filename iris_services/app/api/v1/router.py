"""
Top-level router for version 1 of the local API.

Aggregates the per-entity routers under their resource prefixes.
"""

from fastapi import APIRouter

from .endpoints import appointments, patients

router = APIRouter()

router.include_router(appointments.router, prefix="/appointments", tags=["appointments"])
router.include_router(patients.router, prefix="/patients", tags=["patients"])
