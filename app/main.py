"""
FastAPI application for the Transaction DAG Statistics Engine.

Endpoints:
    POST /upload  — Accept a transaction database, return DAG statistics as JSON
    GET  /health  — System health check
    GET  /metrics — Statistics of the most recent run
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router
from app.config import API_VERSION

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Transaction DAG Statistics Engine",
    description="Computes depth and reference statistics of transaction DAGs.",
    version=API_VERSION,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
