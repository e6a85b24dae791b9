"""Answer Gate API - FastAPI surface for the answer-quality gate."""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

# Load environment variables from .env file
from dotenv import load_dotenv
load_dotenv()

from fastapi import Body, FastAPI, Query, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from answer_gate import __version__
from answer_gate.config import get_settings
from answer_gate.errors import InvalidSubmissionError
from answer_gate.models.submission import Mode
from answer_gate.monitoring import attach_instrumentator
from answer_gate.pipeline.runner import run_turn

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Answer Gate API",
    description="Answer-quality gate and follow-up questions for knowledge-retention questionnaires",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(InvalidSubmissionError)
async def invalid_submission_handler(request: Request, exc: InvalidSubmissionError) -> JSONResponse:
    logger.info("Rejected submission: %s %s", exc.message, exc.details)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    if any((err.get("loc") or ("",))[0] == "query" for err in exc.errors()):
        message = "Invalid mode"
    else:
        message = "Missing required fields"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        return JSONResponse(status_code=exc.status_code, content={"error": "Method not allowed"})
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})


@app.post("/followup", tags=["followup"])
async def followup(
    payload: Optional[Dict[str, Any]] = Body(None),
    mode: Optional[Mode] = Query(None, description="quick | full | minimal"),
) -> Dict[str, Any]:
    """Classify one answer and optionally return a follow-up question.

    Returns 200 for every outcome except a submission missing required
    fields, which is rejected with 400.
    """
    result = await run_turn(payload, mode=mode)
    return result.to_payload()


@app.options("/followup", include_in_schema=False)
async def followup_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK)


@app.get("/health", tags=["health"])
async def health() -> Dict[str, bool]:
    return {"ok": True}


# Prometheus metrics
attach_instrumentator(app)


def run():
    """Run the API server."""
    import uvicorn

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(
        "answer_gate.api.main:app",
        host="0.0.0.0",
        port=port,
        reload=os.getenv("ENV", "production") == "development",
    )


if __name__ == "__main__":
    run()
