"""
Request dependencies: store access, JSON body parsing, and the create/lookup checks
that run before the paste route handlers.
"""
import json
from typing import Any, Optional

from fastapi import Depends, Request

from app.config import settings
from app.database import PasteStore
from app.errors import NotFoundError, PasteAPIError, PayloadTooLargeError, ValidationError
from app.models import Paste, PasteCreate


def get_store(request: Request) -> PasteStore:
    """The store injected into the app at startup."""
    return request.app.state.store


def _is_json(content_type: str) -> bool:
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime == "application/json" or mime.endswith("+json")


async def json_body(request: Request) -> Any:
    """
    Parse the request body as JSON.

    Bodies without a JSON content type, and empty bodies, parse to ``{}``.
    The body is read chunk by chunk and reading stops as soon as it passes
    MAX_BODY_BYTES, whether or not a Content-Length was sent.

    Raises:
        PayloadTooLargeError: If the body exceeds MAX_BODY_BYTES (413)
        PasteAPIError: If the body is not valid JSON (400)
    """
    if not _is_json(request.headers.get("content-type", "")):
        return {}

    limit = settings.MAX_BODY_BYTES
    declared = request.headers.get("content-length")
    if declared and declared.isdigit() and int(declared) > limit:
        raise PayloadTooLargeError()

    chunks = []
    received = 0
    async for chunk in request.stream():
        received += len(chunk)
        if received > limit:
            raise PayloadTooLargeError()
        chunks.append(chunk)

    raw = b"".join(chunks)
    if not raw.strip():
        return {}

    try:
        return json.loads(raw)
    except ValueError as e:
        raise PasteAPIError(str(e), 400) from e


def _is_truthy(value: Any) -> bool:
    """JSON truthiness: null, false, "", 0 and NaN are falsy; arrays and objects never are."""
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == value and value != 0
    return True


async def body_has_text_property(body: Any = Depends(json_body)) -> PasteCreate:
    """
    Require ``data.text`` on a create request.

    A missing or non-object ``data`` counts as missing text. Any other truthy
    JSON value, including ``[]`` and ``{}``, is accepted.

    Returns:
        The creation draft built from ``data``

    Raises:
        ValidationError: If ``data.text`` is missing or falsy (400)
    """
    data = body.get("data") if isinstance(body, dict) else None
    if not isinstance(data, dict):
        data = {}

    if _is_truthy(data.get("text")):
        return PasteCreate.model_validate(data)
    raise ValidationError("A 'text' property is required.")


RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


def _coerce_id(paste_id: str) -> Optional[float]:
    """
    Numeric value of a path id, or None when it is not a number.

    Accepts decimals with surrounding whitespace, exponents, and unsigned
    ``0x`` / ``0o`` / ``0b`` integers. Digit separators are rejected.
    """
    text = paste_id.strip()
    if not text:
        # A whitespace-only segment such as "%20" reads as 0
        return 0
    if "_" in text:
        return None

    radix = RADIX_PREFIXES.get(text[:2].lower())
    if radix:
        digits = text[2:]
        if not digits.isalnum():
            return None
        try:
            return int(digits, radix)
        except ValueError:
            return None

    try:
        return float(text)
    except ValueError:
        return None


async def paste_exists(paste_id: str, store: PasteStore = Depends(get_store)) -> Paste:
    """
    Resolve the ``paste_id`` path segment to a stored paste.

    Raises:
        NotFoundError: If no paste has that id (404)
    """
    found = store.get_paste(_coerce_id(paste_id))
    if found is None:
        raise NotFoundError(f"Paste id not found: {paste_id}")
    return found
