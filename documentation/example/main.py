import logging

from observable import Handlers, from_iterable

from .sources.handlers import handle_complete, handle_error, handle_request
from .sources.mocks import requests_mock
from .sources.models import Request

handlers: Handlers[Request] = Handlers(
    on_next=handle_request,
    on_error=handle_error,
    on_complete=handle_complete,
)


def main():
    requests = from_iterable(requests_mock)
    subscription = requests.subscribe(handlers)
    subscription.unsubscribe()


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    main()
