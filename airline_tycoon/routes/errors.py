"""Translation of engine errors into HTTP errors."""

import logging
from fastapi import HTTPException

from ..errors import GameError, InvalidStateError, ReferenceNotFoundError

logger = logging.getLogger(__name__)


def to_http_exception(error: GameError) -> HTTPException:
    """
    Map an engine error to an HTTP status.

    Args:
        error: Error raised by the engine

    Returns:
        409 for invalid state, 404 for unknown references, 400 otherwise
    """
    if isinstance(error, InvalidStateError):
        status_code = 409
    elif isinstance(error, ReferenceNotFoundError):
        status_code = 404
    else:
        status_code = 400
    logger.warning(f"{type(error).__name__}: {error}")
    return HTTPException(status_code=status_code, detail={"error": str(error), **error.details})
