from dataclasses import dataclass, field

from observable import Handlers

__all__ = ("Recorder", "TeardownCounter")


@dataclass(repr=False, eq=False, slots=True)
class Recorder[T]:
    values: list[T] = field(default_factory=list, init=False)
    errors: list[Exception] = field(default_factory=list, init=False)
    completions: int = field(default=0, init=False)

    @property
    def handlers(self) -> Handlers[T]:
        return Handlers(self.on_next, self.on_error, self.on_complete)

    @property
    def is_terminated(self) -> bool:
        return bool(self.errors) or self.completions > 0

    def on_next(self, value: T) -> None:
        self.values.append(value)

    def on_error(self, error: Exception) -> None:
        self.errors.append(error)

    def on_complete(self) -> None:
        self.completions += 1


@dataclass(repr=False, eq=False, slots=True)
class TeardownCounter:
    calls: int = field(default=0, init=False)

    def __call__(self) -> None:
        self.calls += 1
