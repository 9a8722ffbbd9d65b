from dataclasses import dataclass
from typing import Generic, TypeVar


R = TypeVar("R")


@dataclass(frozen=True)
class Ok(Generic[R]):
    """Marks a value as present. Lets `None` (or any other value) be stored
    as a legitimate result, distinct from "not computed yet"."""
    value: R
