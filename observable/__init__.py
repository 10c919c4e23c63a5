from ._core.common.event import Event, EventListener
from ._core.observable import Observable, Producer, ProducerRun, Subscription
from ._core.observer import (
    Handlers,
    Observer,
    ObserverTerminated,
    Teardown,
    Termination,
)

__all__ = (
    "Event",
    "EventListener",
    "Handlers",
    "Observable",
    "Observer",
    "ObserverTerminated",
    "Producer",
    "ProducerRun",
    "Subscription",
    "Teardown",
    "Termination",
    "from_iterable",
)

from_iterable = Observable.from_iterable
