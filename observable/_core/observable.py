from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from logging import Logger
from types import TracebackType
from typing import Any, Self, override

from observable._core.common.event import Event, EventChannel, EventListener
from observable._core.observer import Handlers, Observer, Teardown

type Producer[T] = Callable[[Observer[T]], Teardown | None]


@dataclass(frozen=True, slots=True)
class ProducerRun(Event):
    observable: Observable[Any]
    observer: Observer[Any]

    @override
    def __str__(self) -> str:
        return f"`{self.observable}` has run its producer for `{self.observer}`."


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class Subscription:
    __observer: Observer[Any]

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.unsubscribe()

    @property
    def closed(self) -> bool:
        return self.__observer.is_unsubscribed

    def unsubscribe(self) -> None:
        self.__observer.unsubscribe()


class Observable[T]:
    __slots__ = ("__channel", "__producer")

    __channel: EventChannel
    __producer: Producer[T]

    def __init__(
        self,
        producer: Producer[T],
        /,
        *,
        logger: Logger | None = None,
    ) -> None:
        self.__channel = EventChannel([logger]) if logger else EventChannel()
        self.__producer = producer

    def subscribe(
        self,
        handlers: Handlers[T] | None = None,
        /,
        *,
        on_next: Callable[[T], Any] | None = None,
        on_error: Callable[[Exception], Any] | None = None,
        on_complete: Callable[[], Any] | None = None,
    ) -> Subscription:
        callbacks = (on_next, on_error, on_complete)

        if handlers is None:
            handlers = Handlers(*callbacks)

        elif any(callback is not None for callback in callbacks):
            raise TypeError("Pass either a `Handlers` instance or keyword handlers.")

        observer = Observer(handlers, channel=self.__channel)

        with self.__channel.dispatch(ProducerRun(self, observer)):
            teardown = self.__producer(observer)

        observer.set_teardown(teardown if callable(teardown) else None)
        return Subscription(observer)

    def add_logger(self, logger: Logger) -> Self:
        self.__channel.add_logger(logger)
        return self

    def add_listener(self, listener: EventListener) -> Self:
        self.__channel.add_listener(listener)
        return self

    def remove_listener(self, listener: EventListener) -> Self:
        self.__channel.remove_listener(listener)
        return self

    @classmethod
    def from_iterable(
        cls,
        values: Iterable[T],
        /,
        *,
        logger: Logger | None = None,
    ) -> Observable[T]:
        items = tuple(values)

        def producer(observer: Observer[T]) -> Teardown:
            for item in items:
                if observer.is_unsubscribed:
                    break

                observer.next(item)

            observer.complete()
            return lambda: observable.__channel.debug(
                f"`{observable}` has released `{observer}`."
            )

        observable = cls(producer, logger=logger)
        return observable
