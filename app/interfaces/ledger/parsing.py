"""
Request body parsing for the ledger routes.

``parse_request_body`` is the single place where raw bytes become a
typed request. It never raises on bad input: it returns either the
validated schema instance or a ``BadRequest`` describing what was wrong.
"""

import logging
from dataclasses import dataclass
from typing import TypeVar, Union

from fastapi import Request
from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


@dataclass(frozen=True)
class BadRequest:
    """Outcome of a body that could not be turned into a request.

    Attributes:
        reason: Diagnostic text. Never contains the submitted values.
    """

    reason: str


class BadRequestError(Exception):
    """Raised at the HTTP boundary to turn a BadRequest into a 400."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


def _describe(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors(include_input=False, include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "body"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def parse_request_body(
    raw: bytes,
    schema: type[SchemaT],
    max_size: int | None = None,
) -> Union[SchemaT, BadRequest]:
    """Decode and validate a JSON request body.

    Args:
        raw: The body exactly as received.
        schema: Pydantic model the body must satisfy.
        max_size: Optional upper bound on the body length in bytes.

    Returns:
        A populated ``schema`` instance, or ``BadRequest`` when the body is
        too large, is not JSON, or misses / mistypes a required field.
    """
    if max_size is not None and len(raw) > max_size:
        return BadRequest(f"body of {len(raw)} bytes exceeds limit of {max_size}")
    try:
        return schema.model_validate_json(raw)
    except ValidationError as exc:
        return BadRequest(_describe(exc))


def check_declared_length(value: str | None, max_size: int) -> BadRequest | None:
    """Reject a body by its Content-Length header before it is read.

    Missing or unparsable headers pass; chunked bodies are still bounded
    by the check in ``parse_request_body`` once read.
    """
    if value is None:
        return None
    try:
        declared = int(value)
    except ValueError:
        return None
    if declared > max_size:
        return BadRequest(f"declared body of {declared} bytes exceeds limit of {max_size}")
    return None


def request_body(schema: type[SchemaT]):
    """Build a FastAPI dependency that yields ``schema`` parsed from the body.

    All ledger routes share this dependency, so a malformed body is
    rejected the same way everywhere.
    """

    async def dependency(request: Request) -> SchemaT:
        max_size = request.app.state.settings.max_request_size_bytes
        declared = check_declared_length(request.headers.get("content-length"), max_size)
        if declared is not None:
            raise BadRequestError(declared.reason)
        raw = await request.body()
        result = parse_request_body(raw, schema, max_size=max_size)
        if isinstance(result, BadRequest):
            raise BadRequestError(result.reason)
        return result

    return dependency
