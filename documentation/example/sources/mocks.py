from .constants import HTTP_GET_METHOD, HTTP_POST_METHOD
from .models import Request, User

user_mock = User(name="User Name", age=26, roles=["user", "admin"])

requests_mock = (
    Request(
        method=HTTP_POST_METHOD,
        host="service.example",
        path="user",
        body=user_mock,
    ),
    Request(
        method=HTTP_GET_METHOD,
        host="service.example",
        path="user",
        params={"id": "3f5h67s4s"},
    ),
)
