from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from functools import partial
from threading import RLock
from typing import Any, override

from observable._core.common.event import Event, EventChannel
from observable.exceptions import TeardownError

type Teardown = Callable[[], Any]


class Termination(StrEnum):
    COMPLETE = "complete"
    ERROR = "error"
    UNSUBSCRIBE = "unsubscribe"


@dataclass(repr=False, frozen=True, slots=True)
class Handlers[T]:
    on_next: Callable[[T], Any] | None = None
    on_error: Callable[[Exception], Any] | None = None
    on_complete: Callable[[], Any] | None = None


@dataclass(frozen=True, slots=True)
class ObserverTerminated(Event):
    observer: Observer[Any]
    termination: Termination
    error: Exception | None = None

    @override
    def __str__(self) -> str:
        reason = f" with `{self.error!r}`" if self.error is not None else ""
        return f"`{self.observer}` terminated by {self.termination}{reason}."


class Observer[T]:
    __slots__ = (
        "__channel",
        "__handlers",
        "__has_teardown",
        "__is_finalized",
        "__is_unsubscribed",
        "__lock",
        "__teardown",
    )

    __channel: EventChannel
    __handlers: Handlers[T]
    __has_teardown: bool
    __is_finalized: bool
    __is_unsubscribed: bool
    __lock: RLock
    __teardown: Teardown | None

    def __init__(
        self,
        handlers: Handlers[T] | None = None,
        /,
        *,
        channel: EventChannel | None = None,
    ) -> None:
        self.__channel = channel or EventChannel()
        self.__handlers = handlers or Handlers()
        self.__has_teardown = False
        self.__is_finalized = False
        self.__is_unsubscribed = False
        self.__lock = RLock()
        self.__teardown = None

    @property
    def is_unsubscribed(self) -> bool:
        return self.__is_unsubscribed

    def next(self, value: T, /) -> None:
        with self.__lock:
            if self.__is_unsubscribed:
                return

            if (on_next := self.__handlers.on_next) is not None:
                on_next(value)

    def error(self, error: Exception, /) -> None:
        if not self.__claim_termination():
            return

        event = ObserverTerminated(self, Termination.ERROR, error)
        on_error = self.__handlers.on_error
        handler = partial(on_error, error) if on_error is not None else None
        self.__terminate(event, handler)

    def complete(self) -> None:
        if not self.__claim_termination():
            return

        event = ObserverTerminated(self, Termination.COMPLETE)
        self.__terminate(event, self.__handlers.on_complete)

    def unsubscribe(self) -> None:
        if not self.__claim_termination():
            return

        event = ObserverTerminated(self, Termination.UNSUBSCRIBE)
        self.__terminate(event)

    def set_teardown(self, teardown: Teardown | None, /) -> None:
        with self.__lock:
            if self.__has_teardown:
                raise TeardownError(f"`{self}` already has a teardown.")

            self.__has_teardown = True

            # Termination may already have happened while the producer was running.
            if not self.__is_finalized:
                self.__teardown = teardown
                return

        if teardown is not None:
            teardown()

    def __claim_termination(self) -> bool:
        with self.__lock:
            if self.__is_unsubscribed:
                return False

            self.__is_unsubscribed = True
            return True

    def __terminate(
        self,
        event: ObserverTerminated,
        handler: Callable[[], Any] | None = None,
    ) -> None:
        try:
            with self.__channel.dispatch(event):
                try:
                    if handler is not None:
                        handler()
                finally:
                    self.__finalize()
        finally:
            # A listener can fail before the transition is reached.
            self.__finalize()

    def __finalize(self) -> None:
        with self.__lock:
            self.__is_finalized = True
            teardown, self.__teardown = self.__teardown, None

        if teardown is not None:
            teardown()
