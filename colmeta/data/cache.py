import abc
import typing

from colmeta.data.column import Column
from colmeta.data.error import Error

__all__ = ("Cache",)


class Cache(abc.ABC):
    @abc.abstractmethod
    def add_columns(self, *, table_name: str, columns: typing.Iterable[Column]) -> None | Error:
        raise NotImplementedError

    @abc.abstractmethod
    def get_columns(self, *, table_name: str) -> tuple[Column, ...] | None | Error:
        raise NotImplementedError
