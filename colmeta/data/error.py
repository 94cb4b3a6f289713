from __future__ import annotations

import inspect
import typing

import pydantic

__all__ = ("CacheFileCorrupt", "ColMetaError", "Error")


class ColMetaError(Exception):
    """Base class for errors occurring in the colmeta codebase"""


class CacheFileCorrupt(ColMetaError):
    def __init__(self, *, cache_file: str, reason: str):
        super().__init__(f"The cache file, {cache_file}, could not be read: {reason}")


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class Error:
    file: str
    fn: str
    fn_args: dict[str, typing.Any]
    error_message: str

    @staticmethod
    def new(error_message: str, /, **fn_args: typing.Any) -> Error:
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        try:
            if caller is None:
                return Error(file="", fn="", fn_args=fn_args, error_message=error_message)

            return Error(
                file=caller.f_code.co_filename,
                fn=caller.f_code.co_name,
                fn_args=fn_args,
                error_message=error_message,
            )
        finally:
            del frame, caller

    def __str__(self) -> str:
        if self.fn_args:
            args = ", ".join(f"{k}={v!r}" for k, v in self.fn_args.items())
            return f"{self.error_message} [{self.fn}({args})]"
        return self.error_message
