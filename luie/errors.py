from dataclasses import dataclass


class LazyError(Exception):
    """Base class for errors raised by luie itself."""


@dataclass
class UninitializedError(LazyError, TypeError):
    message: str = "Lazy async value is not initialized yet"

    def __post_init__(self):
        Exception.__init__(self, self.message)

    def __str__(self):
        return self.message
