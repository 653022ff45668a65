"""Response envelope helpers.

Every JSON response has the shape ``{success, message?, count?, data?, errors?}``;
keys with no value are left out.
"""

from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def _envelope(**fields: Any) -> Dict[str, Any]:
    return {key: value for key, value in fields.items() if value is not None}


def success_response(
    data: Any = None,
    *,
    message: Optional[str] = None,
    count: Optional[int] = None,
    status_code: int = 200,
) -> JSONResponse:
    """Successful response; Task models are serialized with their camelCase names."""
    body = _envelope(success=True, message=message, count=count, data=data)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body, by_alias=True))


def error_response(
    status_code: int,
    message: str,
    *,
    errors: Optional[Dict[str, str]] = None,
    error: Optional[str] = None,
) -> JSONResponse:
    """Failed response; ``error`` carries internal detail and is only set in debug mode."""
    body = _envelope(success=False, message=message, errors=errors, error=error)
    return JSONResponse(status_code=status_code, content=body)
