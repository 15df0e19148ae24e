from dataclasses import dataclass
from typing import Any, Sequence, Union

IDLE = "idle"
LOADING = "loading"
SUCCESS = "success"
ERROR = "error"


@dataclass(slots=True, frozen=True)
class Idle:
    status = IDLE

    @property
    def data(self) -> Sequence[Any]:
        return ()


@dataclass(slots=True, frozen=True)
class Loading:
    status = LOADING

    @property
    def data(self) -> Sequence[Any]:
        return ()


@dataclass(slots=True, frozen=True)
class Success:
    data: Sequence[Any]

    status = SUCCESS


@dataclass(slots=True, frozen=True)
class Error:
    message: str

    status = ERROR

    @property
    def data(self) -> Sequence[Any]:
        return ()


FetchState = Union[Idle, Loading, Success, Error]
