"""
Error Handlers - Account Tiering
account_tiering/routers/errors.py

Maps request validation errors and wizard exceptions to ErrorResponse JSON.
"""

from datetime import datetime, timezone

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from account_tiering.core.exceptions import (
    AnswerValidationException,
    EntityNotFoundException,
    WizardException,
    WizardStepException,
)
from account_tiering.models.errors import ErrorResponse


#  Validation Error Messages


FIELD_MESSAGES = {
    "name": {
        "missing": "Name is required",
        "string_too_short": "Name cannot be empty",
        "string_too_long": "Name must not exceed 255 characters",
        "string_type": "Name must be a string",
    },
    "description": {
        "missing": "Company description is required",
        "string_too_short": "Company description is required",
    },
    "industry": {
        "missing": "Industry is required",
        "string_too_short": "Industry is required",
    },
    "target_market": {
        "missing": "Target market is required",
        "string_too_short": "Target market is required",
    },
    "text": {
        "missing": "Question text is required",
        "string_too_short": "Question text cannot be empty",
    },
    "type": {
        "enum": "Question type must be one of: boolean, number, multiple_choice",
    },
    "weight": {
        "missing": "Question weight is required",
        "float_type": "Question weight must be a number",
        "float_parsing": "Question weight must be a valid number",
        "finite_number": "Question weight must be a finite number",
    },
}

DEFAULT_MESSAGES = {
    "missing": "Field '{field}' is required",
    "string_too_short": "Field '{field}' is too short",
    "string_too_long": "Field '{field}' is too long",
    "less_than_equal": "Field '{field}' exceeds maximum allowed value",
    "greater_than_equal": "Field '{field}' is below minimum allowed value",
    "uuid_parsing": "Field '{field}' must be a valid UUID",
    "uuid_type": "Field '{field}' must be a valid UUID",
    "string_type": "Field '{field}' must be a string",
    "float_type": "Field '{field}' must be a number",
    "float_parsing": "Field '{field}' must be a valid number",
    "bool_type": "Field '{field}' must be true or false",
    "int_type": "Field '{field}' must be an integer",
    "list_type": "Field '{field}' must be a list",
    "json_invalid": "Malformed JSON request body",
    "extra_forbidden": "Unknown field '{field}' is not allowed",
}


def get_validation_message(field: str, error_type: str) -> str:
    name = field.rsplit(".", 1)[-1]
    if name in FIELD_MESSAGES:
        for key in FIELD_MESSAGES[name]:
            if key in error_type:
                return FIELD_MESSAGES[name][key]
    for key, template in DEFAULT_MESSAGES.items():
        if key in error_type:
            return template.format(field=field)
    return f"Invalid value for field '{field}'"


def _error_content(error_code: str, message: str, details: dict = None) -> dict:
    return ErrorResponse(error_code=error_code, message=message, details=details).model_dump(mode="json")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_content("VALIDATION_ERROR", "Request validation failed"),
        )
    err = errors[0]
    error_type = err.get("type", "")
    loc = err.get("loc", [])
    if "json_invalid" in error_type:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_content("INVALID_REQUEST", "Malformed JSON request body"),
        )
    field = ".".join(str(l) for l in loc if l not in ("body", "path", "query"))
    if error_type == "value_error":
        message = str(err.get("msg", "")).removeprefix("Value error, ")
    else:
        message = get_validation_message(field, error_type)
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content=_error_content(
            "VALIDATION_ERROR",
            message,
            {"field": field, "type": error_type} if field else None,
        ),
    )


async def wizard_exception_handler(request: Request, exc: WizardException):
    if isinstance(exc, EntityNotFoundException):
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=_error_content(
                f"{exc.entity_type.upper()}_NOT_FOUND",
                f"{exc.entity_type} not found",
                {"id": exc.entity_id},
            ),
        )
    if isinstance(exc, AnswerValidationException):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=_error_content("INVALID_ANSWER", exc.message, {"question_id": exc.question_id}),
        )
    if isinstance(exc, WizardStepException):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=_error_content("STEP_INCOMPLETE", exc.message, {"step": int(exc.step)}),
        )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_content("WIZARD_ERROR", str(exc)),
    )
