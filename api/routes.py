"""
API Routes — upload, health, and metrics endpoints.
"""

import io
import time

from fastapi import APIRouter, File, HTTPException, UploadFile
from fastapi.responses import JSONResponse

from app.config import API_VERSION, MAX_TRANSACTIONS
from core.ingestion.database_parser import FormatError, parse_lines
from core.output.report_formatter import format_output
from services.processing_pipeline import ProcessingService
from utils.metrics import MetricsTracker

router = APIRouter()
metrics_tracker = MetricsTracker()


@router.get("/health")
async def health():
    """Return system health status."""
    return {"status": "healthy", "version": API_VERSION}


@router.get("/metrics")
async def metrics():
    """Return statistics from the most recent run."""
    return metrics_tracker.get_metrics()


@router.post("/upload")
async def upload_database(file: UploadFile = File(...)):
    """
    Accept a transaction database upload, compute the DAG statistics,
    and return a structured JSON response.
    """
    contents = await file.read()
    try:
        text = contents.decode("utf-8")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="Database must be UTF-8 text.")

    try:
        records = parse_lines(io.StringIO(text, newline=None))
    except FormatError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if len(records) > MAX_TRANSACTIONS:
        raise HTTPException(
            status_code=400,
            detail=f"Database exceeds {MAX_TRANSACTIONS} transactions.",
        )

    start_time = time.time()
    result = ProcessingService().process(records)
    output = format_output(records, result)
    output["summary"]["processing_time_seconds"] = round(time.time() - start_time, 2)

    metrics_tracker.record(output)
    return JSONResponse(content=output)
