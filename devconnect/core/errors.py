"""
Exception handlers shaping every error response as {"msg": ...} or {"errors": [...]}
"""

import logging
from typing import Any, Dict, List

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# (field, pydantic error type) takes precedence over the plain field entry
VALIDATION_MESSAGES: Dict[Any, str] = {
    "name": "Name is required",
    "email": "Please include a valid email",
    "password": "Password is required",
    ("password", "string_too_short"): "Please enter a password with 6 or more characters",
    "status": "Status is required",
    "skills": "Skills is required",
    "title": "Title is required",
    "company": "Company is required",
    "school": "School is required",
    "degree": "Degree is required",
    "fieldOfStudy": "Field of study is required",
    "from": "From date is required",
}


def format_validation_errors(errors: List[Dict[str, Any]]) -> List[Dict[str, str]]:
    formatted = []
    for err in errors:
        loc = err.get("loc") or ("body",)
        location = str(loc[0])
        param = str(loc[-1]) if len(loc) > 1 else location
        msg = VALIDATION_MESSAGES.get(
            (param, err.get("type")),
            VALIDATION_MESSAGES.get(param, err.get("msg", "Invalid value")),
        )
        formatted.append({"param": param, "msg": msg, "location": location})
    return formatted


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": format_validation_errors(exc.errors())},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if isinstance(exc.detail, list):
        content = {"errors": exc.detail}
    else:
        content = {"msg": exc.detail}
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled exception on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"msg": "Server Error"},
    )
