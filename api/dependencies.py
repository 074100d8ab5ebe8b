"""
Request dependencies and shared response helpers.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from api.models import ErrorResponse
from repositories.transaction_store import TransactionStore

INTERNAL_ERROR_MESSAGE = "Internal server error"


def get_store(request: Request) -> TransactionStore:
    """Resolve the store owned by the running application."""
    return request.app.state.store


def internal_error(logger: logging.Logger, context: str) -> JSONResponse:
    """
    Log the active exception and build the generic 500 response.

    Must be called from inside an `except` block.
    """
    logger.exception("Error fetching %s", context)
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error=INTERNAL_ERROR_MESSAGE).model_dump(),
    )
