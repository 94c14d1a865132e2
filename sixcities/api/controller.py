"""
Base controller for route registration and response helpers.
"""

import logging
from enum import Enum
from typing import Any, Callable, Optional

from fastapi import APIRouter, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


class BaseController:
    """
    Owns an APIRouter and registers handlers on it explicitly.

    Subclasses call ``add_route`` from their constructor, in the order the
    routes must be matched.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.router = APIRouter()

    def add_route(self, path: str, method: HttpMethod, handler: Callable[..., Any], **options) -> None:
        self.router.add_api_route(path, handler, methods=[method.value], **options)
        self.logger.info("Route registered: %s %s", method.value, path)

    def send(self, status_code: int, data: Optional[Any]) -> JSONResponse:
        return JSONResponse(status_code=status_code, content=jsonable_encoder(data, by_alias=True))

    def ok(self, data: Any) -> JSONResponse:
        return self.send(status.HTTP_200_OK, data)

    def created(self, data: Any) -> JSONResponse:
        return self.send(status.HTTP_201_CREATED, data)

    def no_content(self) -> Response:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
