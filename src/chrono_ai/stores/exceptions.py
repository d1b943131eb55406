"""Exceptions for calendar and task store operations.

Exception hierarchy::

    StoreError            (base for all store failures)
    +-- StoreAuthError    (missing client secrets / HTTP 401)
    +-- StoreNotFoundError (HTTP 404, e.g. unknown calendar or task list)

Store calls are not retried; :func:`translate_http_error` only maps the
Google API error onto this hierarchy.
"""

from __future__ import annotations

from googleapiclient.errors import HttpError


class StoreError(Exception):
    """Base exception for store failures.

    Attributes:
        status_code: HTTP status code from the API, or ``None`` if the
            error did not originate from an HTTP response.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class StoreAuthError(StoreError):
    """Raised when the store cannot be authenticated against."""

    def __init__(self, message: str = "Store authentication failed") -> None:
        super().__init__(message, status_code=401)


class StoreNotFoundError(StoreError):
    """Raised when the target calendar or task list does not exist."""

    def __init__(self, message: str = "Store resource not found") -> None:
        super().__init__(message, status_code=404)


def translate_http_error(error: HttpError) -> StoreError:
    """Map an ``HttpError`` to the matching :class:`StoreError`.

    Args:
        error: The ``googleapiclient.errors.HttpError`` to classify.

    Returns:
        A :class:`StoreError` subclass matching the HTTP status code.
    """
    status = error.resp.status

    if status == 401:
        return StoreAuthError(str(error))
    if status == 404:
        return StoreNotFoundError(str(error))
    return StoreError(str(error), status_code=status)
