from logging import getLogger

from .constants import HTTP_STATUS_INTERNAL_SERVER_ERROR, HTTP_STATUS_OK
from .models import Request, Response

logger = getLogger(__name__)


def handle_request(request: Request) -> Response:
    logger.info("%s %s/%s", request.method, request.host, request.path)
    return Response(status=HTTP_STATUS_OK)


def handle_error(error: Exception) -> Response:
    logger.error("Request stream failed: %r", error)
    return Response(status=HTTP_STATUS_INTERNAL_SERVER_ERROR)


def handle_complete() -> None:
    logger.info("complete")
