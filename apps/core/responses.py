"""Uniform response envelope used by every API endpoint."""

from __future__ import annotations

from typing import Any, Iterable

from rest_framework import status as http_status  # type: ignore
from rest_framework.response import Response  # type: ignore


def envelope(
    data: Any = None,
    message: str = "",
    *,
    success: bool = True,
    code: str | None = None,
    validation_errors: Iterable[dict[str, Any]] | None = None,
    status: int = http_status.HTTP_200_OK,
    headers: dict[str, str] | None = None,
) -> Response:
    """Build ``{success, data?, message, code?, validationErrors?}``."""

    body: dict[str, Any] = {"success": success}
    if data is not None:
        body["data"] = data
    body["message"] = message
    if code:
        body["code"] = code
    if validation_errors is not None:
        body["validationErrors"] = list(validation_errors)
    return Response(body, status=status, headers=headers)


def error_envelope(
    message: str,
    code: str,
    *,
    status: int = http_status.HTTP_400_BAD_REQUEST,
    validation_errors: Iterable[dict[str, Any]] | None = None,
) -> Response:
    return envelope(
        message=message,
        success=False,
        code=code,
        validation_errors=validation_errors,
        status=status,
    )
