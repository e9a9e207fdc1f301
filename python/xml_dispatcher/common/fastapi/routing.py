import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import HTTPException
from lxml import etree
from pydantic import ValidationError

from ...config import DispatcherConfig
from ...exceptions import NoHandlerFoundError
from ...processor import XMLProcessor

logger = logging.getLogger(__name__)


def _too_large(size: int, max_payload_bytes: int) -> HTTPException:
    return HTTPException(
        status_code=HTTPStatus.REQUEST_ENTITY_TOO_LARGE.value,
        detail=f"Payload of {size} bytes exceeds limit of {max_payload_bytes}",
    )


async def read_limited_body(request: Request, max_payload_bytes: int) -> bytes:
    """Read the request body, stopping as soon as it exceeds the cap.

    A declared Content-Length over the cap is rejected before anything is read.

    Raises:
        HTTPException: 413 when the body is larger than ``max_payload_bytes``
    """
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > max_payload_bytes:
        raise _too_large(int(declared), max_payload_bytes)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_payload_bytes:
            raise _too_large(len(body), max_payload_bytes)
    return bytes(body)


@dataclass(frozen=True)
class RouteConfig:
    """Configuration for the XML processing route.

    Attributes:
        path: The URL path for the route (e.g., "/xml")
        method: The HTTP method
        tags: Optional list of tags for documentation grouping
        summary: Optional short summary for documentation
    """

    path: str
    method: str = "POST"
    tags: Optional[List[str]] = None
    summary: Optional[str] = None


def normalize_prefix(prefix: str) -> str:
    """Return ``prefix`` with exactly one leading slash and no trailing slash."""
    stripped = prefix.strip("/")
    return f"/{stripped}" if stripped else ""


def mount_xml_route(
    router: APIRouter,
    processor: XMLProcessor,
    route_config: RouteConfig,
    max_payload_bytes: int,
) -> None:
    """Mount an endpoint that dispatches the raw request body through ``processor``.

    Status codes:
    - 200: a handler processed the payload; its result is returned under "result"
    - 400: the matching handler could not decode the payload
    - 413: the body is larger than ``max_payload_bytes``
    - 422: no registered handler recognizes the payload
    """

    async def process_xml(request: Request) -> Dict[str, Any]:
        payload = await read_limited_body(request, max_payload_bytes)

        try:
            result = processor.process_xml(payload)
        except NoHandlerFoundError as e:
            raise HTTPException(
                status_code=HTTPStatus.UNPROCESSABLE_ENTITY.value, detail=str(e)
            )
        except (etree.XMLSyntaxError, ValidationError) as e:
            logger.error(f"Matched handler failed to decode payload: {e}")
            raise HTTPException(status_code=HTTPStatus.BAD_REQUEST.value, detail=str(e))

        return {"status": "processed", "result": jsonable_encoder(result)}

    router.add_api_route(
        route_config.path,
        process_xml,
        methods=[route_config.method],
        tags=route_config.tags,
        summary=route_config.summary,
    )
    logger.info(f"Mounted XML route: {route_config.method} {route_config.path}")


def create_xml_router(
    processor: XMLProcessor,
    prefix: str = "",
    config: Optional[DispatcherConfig] = None,
    **router_kwargs,
) -> APIRouter:
    """Create a FastAPI router exposing ``processor`` over HTTP.

    Args:
        processor: Dispatcher with its handlers already registered
        prefix: Optional URL prefix for the route (e.g., "/api/v1")
        config: Dispatcher configuration (route path and payload cap)
        **router_kwargs: Additional keyword arguments passed to APIRouter constructor

    Returns:
        APIRouter: A configured FastAPI router
    """
    config = config or DispatcherConfig()
    router = APIRouter(prefix=normalize_prefix(prefix), **router_kwargs)
    mount_xml_route(
        router,
        processor,
        RouteConfig(
            path=config.route_path,
            tags=["xml"],
            summary="Dispatch an XML document to the first matching handler",
        ),
        config.max_payload_bytes,
    )
    return router
