from collections.abc import Callable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from statistics import median
from timeit import repeat
from typing import Annotated, Any, ClassVar, Self

from tabulate import tabulate
from typer import Option, Typer

from observable import Observable, from_iterable


@dataclass(frozen=True, slots=True)
class Timing:
    title: str
    reference_us: Decimal
    subscribe_us: Decimal

    @property
    def overhead(self) -> Decimal:
        return self.subscribe_us - self.reference_us

    @property
    def row(self) -> tuple[str, str, str, str]:
        return (
            self.title,
            f"{self.reference_us:.2f}μs",
            f"{self.subscribe_us:.2f}μs",
            f"{self.overhead:+.2f}μs",
        )

    @classmethod
    def measure(
        cls,
        title: str,
        reference: Callable[[], Any],
        subscription: Callable[[], Any],
        number: int,
    ) -> Self:
        return cls(
            title,
            cls._median_us(reference, number),
            cls._median_us(subscription, number),
        )

    @staticmethod
    def _median_us(callable_: Callable[[], Any], number: int) -> Decimal:
        seconds = repeat(callable_, repeat=max(number, 1), number=1)
        return Decimal(median(seconds)) * (10**6)


@dataclass(frozen=True, slots=True)
class SubscribeBenchmark:
    sizes: ClassVar[tuple[int, ...]] = (0, 1, 10, 100, 1000)

    def start(self, number: int = 1) -> Iterator[Timing]:
        for size in self.sizes:
            values = tuple(range(size))
            observable = from_iterable(values)

            def reference():
                for value in values:
                    handle(value)

                complete()

            def subscription():
                observable.subscribe(on_next=handle, on_complete=complete)

            yield Timing.measure(f"{size} values", reference, subscription, number)

        producer = Observable(lambda observer: observer.complete())
        yield Timing.measure("empty producer", complete, producer.subscribe, number)


def handle(value: int):
    pass


def complete():
    pass


cli = Typer()


@cli.command()
def main(number: Annotated[int, Option("--number", "-n", min=0)] = 1000):
    results = SubscribeBenchmark().start(number)
    headers = ("", "Reference Time (μs)", "subscribe Time (μs)", "Overhead (μs)")
    data = (result.row for result in results)
    table = tabulate(data, headers=headers)
    print(table)


if __name__ == "__main__":
    cli()
