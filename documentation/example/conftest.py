import pytest
from faker import Faker

from .sources.constants import HTTP_GET_METHOD, HTTP_POST_METHOD
from .sources.models import Request, User


@pytest.fixture(scope="function", autouse=True)
def setup_faker():
    Faker.seed(0)


@pytest.fixture(scope="function")
def faker() -> Faker:
    return Faker()


@pytest.fixture(scope="function")
def requests(faker) -> list[Request]:
    user = User(
        name=faker.name(),
        age=faker.pyint(min_value=18, max_value=99),
        roles=["user"],
    )
    return [
        Request(
            method=HTTP_POST_METHOD,
            host=faker.hostname(),
            path="user",
            body=user,
        ),
        Request(
            method=HTTP_GET_METHOD,
            host=faker.hostname(),
            path="user",
            params={"id": faker.uuid4()},
        ),
    ]
