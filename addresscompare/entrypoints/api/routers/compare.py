# addresscompare/entrypoints/api/routers/compare.py
from __future__ import annotations

import logging

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from ..errors import error_response
from ....schemas import CompareRequest, CompareResponse, ErrorOut
from ....service_layer.comparison import compare_addresses

log = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["compare"])


@router.post(
    "/compare-addresses",
    response_model=CompareResponse,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def compare(body: CompareRequest, response: Response) -> CompareResponse | JSONResponse:
    # Never cached: every request is scored fresh.
    response.headers["Cache-Control"] = "no-store"

    try:
        result = compare_addresses(body.address1, body.address2)
    except Exception:
        log.exception("address comparison failed")
        return error_response(500, "Internal server error", "Failed to process address comparison")

    return CompareResponse(
        match=result.match,
        match_percentage=result.match_percentage,
        details=result.details,
    )
