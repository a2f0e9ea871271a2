"""Rendering of mutation results as HTTP responses."""

from collections.abc import Callable
from typing import Any, TypeVar

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette import status

from flashdeck.application.common.action import ActionError
from flashdeck.application.common.result import Result
from flashdeck.infrastructure.common.schemas.action_response import ActionErrorResponse

T = TypeVar("T")


def action_error_response(error: ActionError) -> JSONResponse:
    body = ActionErrorResponse(
        error=error.message,
        error_code=error.code,
        upgrade_required=error.upgrade_required,
        requires_description=error.requires_description,
        reason=error.reason,
    )
    return JSONResponse(status_code=error.status_code, content=body.model_dump())


def action_response(
    result: Result[T, ActionError],
    to_data: Callable[[T], BaseModel | dict[str, Any]],
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Render a use case result as ``{"success": true, "data": ...}`` or the
    uniform error body with the error's status code.
    """
    if result.is_failure:
        return action_error_response(result.unwrap_error())
    data = to_data(result.unwrap())
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": jsonable_encoder(data)},
    )


ACTION_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ActionErrorResponse},
    status.HTTP_401_UNAUTHORIZED: {"model": ActionErrorResponse},
    status.HTTP_403_FORBIDDEN: {"model": ActionErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ActionErrorResponse},
    status.HTTP_422_UNPROCESSABLE_CONTENT: {"model": ActionErrorResponse},
}
