from typing import Final, Literal

HTTPMethod = Literal["GET", "POST"]
HTTPStatus = Literal[200, 500]

HTTP_GET_METHOD: Final = "GET"
HTTP_POST_METHOD: Final = "POST"

HTTP_STATUS_OK: Final = 200
HTTP_STATUS_INTERNAL_SERVER_ERROR: Final = 500
