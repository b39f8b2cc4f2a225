"""API error types and the DRF exception handler producing the envelope."""

from __future__ import annotations

from typing import Any, Iterable, Iterator

import structlog
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied  # type: ignore
from django.http import Http404  # type: ignore
from rest_framework import exceptions, status  # type: ignore
from rest_framework.views import set_rollback  # type: ignore

from .responses import error_envelope

logger = structlog.get_logger(__name__)


class ApiError(Exception):
    """Client-facing failure carrying an HTTP status and a machine-readable code."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "BAD_REQUEST"
    message = "Bad request"

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        validation_errors: Iterable[dict[str, Any]] | None = None,
    ) -> None:
        if message is not None:
            self.message = message
        if code is not None:
            self.code = code
        self.validation_errors = list(validation_errors) if validation_errors is not None else None
        super().__init__(self.message)


class MissingRequiredFields(ApiError):
    code = "MISSING_REQUIRED_FIELDS"

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = list(fields)
        super().__init__(f"Missing required fields: {', '.join(self.fields)}")


class MissingParameters(ApiError):
    code = "MISSING_PARAMETERS"

    def __init__(self, parameters: Iterable[str]) -> None:
        self.parameters = list(parameters)
        super().__init__(f"Missing required parameters: {', '.join(self.parameters)}")


def _flatten_errors(detail: Any, field: str = "") -> Iterator[dict[str, str]]:
    if isinstance(detail, dict):
        for key, value in detail.items():
            name = key if key != "non_field_errors" else ""
            yield from _flatten_errors(value, f"{field}.{name}" if field and name else field or name)
    elif isinstance(detail, list):
        for item in detail:
            yield from _flatten_errors(item, field)
    else:
        text = str(detail)
        yield {"message": f"{field}: {text}" if field else text, "code": "INVALID_INPUT"}


def envelope_exception_handler(exc, context):  # type: ignore
    """Render every exception raised in a view as an error envelope."""

    if isinstance(exc, ApiError):
        set_rollback()
        return error_envelope(
            exc.message,
            exc.code,
            status=exc.status_code,
            validation_errors=exc.validation_errors,
        )

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    if isinstance(exc, (exceptions.ValidationError, exceptions.ParseError)):
        set_rollback()
        detail = exc.detail if isinstance(exc, exceptions.ValidationError) else [exc.detail]
        return error_envelope(
            "Invalid request data",
            "INVALID_INPUT",
            validation_errors=_flatten_errors(detail),
        )

    if isinstance(exc, exceptions.APIException):
        set_rollback()
        response = error_envelope(
            str(exc.detail),
            str(exc.default_code).upper(),
            status=exc.status_code,
        )
        if getattr(exc, "wait", None):
            response["Retry-After"] = str(int(exc.wait))
        return response

    view = context.get("view")
    logger.error(
        "api.unhandled_error",
        view=view.__class__.__name__ if view is not None else None,
        error=str(exc),
        exc_info=exc,
    )
    set_rollback()
    return error_envelope(
        "Internal server error",
        "INTERNAL_ERROR",
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
