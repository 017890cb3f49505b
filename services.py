import logging
from typing import Optional, Type, TypeVar

import pydantic
from fastapi import Request
from fastapi.responses import JSONResponse

from errors import AnimeAPIError, ValidationError
from models import ApiResponse

logger = logging.getLogger(__name__)

Q = TypeVar("Q", bound=pydantic.BaseModel)

UNKNOWN_ERROR = "Bilinmeyen hata"


def get_client_ip(request: Request) -> Optional[str]:
    """
    The caller's address as seen by us: forwarding headers first, then the peer.
    X-Forwarded-For is passed on verbatim, chain and all.
    """
    forwarded = request.headers.get("x-forwarded-for") or request.headers.get("x-real-ip")
    if forwarded:
        return forwarded
    if request.client:
        return request.client.host
    return None


def parse_query(model: Type[Q], **params: Optional[str]) -> Q:
    try:
        return model(**params)
    except pydantic.ValidationError as e:
        field = e.errors()[0]["loc"][0]
        info = model.model_fields.get(field)
        message = info.description if info and info.description else f"{field} parameter is required"
        raise ValidationError(message) from e


def error_response(exc: Exception) -> JSONResponse:
    if isinstance(exc, AnimeAPIError):
        logger.warning("%s: %s", exc.__class__.__name__, exc.message)
        message = exc.message
    else:
        logger.exception("Unexpected error while handling request")
        message = str(exc)
    body = ApiResponse(success=False, error=message or UNKNOWN_ERROR)
    return JSONResponse(status_code=400, content=body.model_dump(exclude_unset=True))
