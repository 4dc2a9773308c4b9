"""Helper utilities shared across API route handlers."""

import logging

from fastapi import HTTPException, status

from membership_api.domain.errors import NotFoundError, UnknownPermissionsError

logger = logging.getLogger(__name__)


def to_http_exception(exc: ValueError) -> HTTPException:
    """Translate a use case error into the response sent to the client.

    Missing targets answer 404. Unknown permissions answer 400 with the full
    list of offending ids. Every other rejection answers 400 with its message.
    """

    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))

    if isinstance(exc, UnknownPermissionsError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": str(exc),
                "nonexistent_permissions": exc.unknown,
            },
        )

    logger.info("Request rejected: %s", exc)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
