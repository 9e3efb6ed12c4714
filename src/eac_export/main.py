#!/usr/bin/env python3

import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.responses import Response

from .core.dependencies import get_serializer
from .core.env_utils import getenv_clean
from .core.logging import setup_logging
from .models.models import ExportRequest

logger = logging.getLogger(__name__)

# Application start time for uptime calculation
_app_start_time = time.time()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    setup_logging(
        getenv_clean("LOG_LEVEL", "INFO"),
        json_output=getenv_clean("LOG_FORMAT", "json").lower() != "plain",
    )
    logger.info("Starting EAC-CPF export service")

    yield

    logger.info("Shutting down EAC-CPF export service")


app = FastAPI(
    title="EAC-CPF Export API",
    description="API for exporting archival agent records as EAC-CPF",
    version=os.getenv("APP_VERSION", "unknown"),
    lifespan=lifespan
)


@app.get("/healthz")
async def health_check():
    """Liveness probe - checks if application is alive and can serve requests"""
    current_time = time.time()
    return {
        "status": "healthy",
        "timestamp": current_time,
        "uptime": current_time - _app_start_time,
        "api_version": os.getenv("APP_VERSION", "unknown"),
    }


@app.post("/api/export/eac")
def export_eac(request: ExportRequest, serializer=Depends(get_serializer)):
    """Export an agent record as an EAC-CPF XML document.

    Args:
        request: Agent record JSON plus its resolved related records
        serializer: EAC-CPF serializer dependency
    """
    from .handlers.export import handle_eac_export

    xml, filename = handle_eac_export(request, serializer)

    return Response(
        content=xml,
        media_type="application/xml",
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"'
        }
    )
