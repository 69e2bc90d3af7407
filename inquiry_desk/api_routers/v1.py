from fastapi import APIRouter

from inquiry_desk.features.admin.routes.auth import router as admin_auth_router
from inquiry_desk.features.admin.routes.inquiries import router as admin_inquiries_router
from inquiry_desk.features.assistant.routes.assistant import router as assistant_router
from inquiry_desk.features.inquiries.routes.intake import router as intake_router
from inquiry_desk.features.inquiries.routes.track import router as track_router

api_router = APIRouter()

# Public
api_router.include_router(intake_router)
api_router.include_router(track_router)
api_router.include_router(assistant_router)

# Admin console
api_router.include_router(admin_auth_router)
api_router.include_router(admin_inquiries_router)
