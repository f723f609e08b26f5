"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from school_api.api.routes.student_routes import router as student_router
from school_api.api.routes.contact_routes import router as contact_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(student_router)
api_router.include_router(contact_router)
