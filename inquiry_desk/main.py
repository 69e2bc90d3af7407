import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inquiry_desk.api_routers.v1 import api_router
from inquiry_desk.features.health.routes.health import router as health_router
from inquiry_desk.platform.config import settings
from inquiry_desk.platform.exceptions import add_exception_handlers

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

app = FastAPI(
    title="Inquiry Desk API",
    description="Project inquiry intake, status tracking and admin triage",
    version="1.0.0",
    debug=settings.DEBUG,
)


@app.get("/", tags=["Info"])
def root():
    return {
        "app_name": "Inquiry Desk API",
        "description": "Lead intake backend for the portfolio site.",
        "version": "1.0.0",
        "docs_url": "/docs",
        "api_base": "/api/v1",
    }


# Pre-flight OPTIONS requests are answered here, before any route logic runs.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

add_exception_handlers(app)

app.include_router(health_router)
app.include_router(api_router, prefix="/api/v1")
