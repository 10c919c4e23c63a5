__all__ = (
    "ObservableError",
    "TeardownError",
)


class ObservableError(Exception): ...


class TeardownError(ObservableError): ...
