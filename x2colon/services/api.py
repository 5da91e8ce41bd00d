"""Transport-agnostic request handlers.

Each handler takes the raw request body (JSON bytes/str or an already
decoded dict) and returns ``(status, body)`` where ``body`` is a JSON-ready
dict. Scan and validation failures become 400 responses; nothing in here
produces a 5xx.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, Field, ValidationError

from x2colon.core import calculate_durations, clean_script
from x2colon.core.errors import ParseError

logger = logging.getLogger(__name__)

Payload = Union[bytes, str, Dict[str, Any]]
Response = Tuple[int, Dict[str, Any]]
M = TypeVar("M", bound=BaseModel)

WELCOME_MESSAGE = "Welcome to x2-colon!"


class TimestampRequest(BaseModel):
    content: str = Field(min_length=2)


class CleanRequest(BaseModel):
    script: str = Field(min_length=1)


def _validation_message(err: ValidationError) -> str:
    parts = []
    for item in err.errors():
        loc = ".".join(str(p) for p in item.get("loc", ()))
        parts.append(f"{loc}: {item['msg']}" if loc else item["msg"])
    return "; ".join(parts)


def _load(model: Type[M], payload: Payload) -> M:
    if isinstance(payload, (bytes, str)):
        return model.model_validate_json(payload)
    return model.model_validate(payload)


def _bad_request(message: str) -> Response:
    return 400, {"error": message}


def handle_hello() -> Response:
    return 200, {"message": WELCOME_MESSAGE}


def handle_timestamp(payload: Payload) -> Response:
    """Sum the ranges found in ``{"content": ...}``."""
    try:
        request = _load(TimestampRequest, payload)
    except ValidationError as e:
        message = _validation_message(e)
        logger.warning("Rejected timestamp request: %s", message)
        return _bad_request(message)

    try:
        output = calculate_durations(request.content)
    except ParseError as e:
        logger.warning("Timestamp request failed (%s): %s", e.kind, e)
        return _bad_request(str(e))

    logger.info("Computed %d line(s), total %s", len(output.lines), output.total.format)
    return 200, output.model_dump()


def handle_clean(payload: Payload) -> Response:
    """Strip every range from ``{"script": ...}``."""
    try:
        request = _load(CleanRequest, payload)
    except ValidationError as e:
        message = _validation_message(e)
        logger.warning("Rejected clean request: %s", message)
        return _bad_request(message)

    return 200, {"cleaned": clean_script(request.script)}
