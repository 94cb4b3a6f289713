import pathlib
import typing

import pydantic

__all__ = ("Config", "LogLevel")


LogLevel = typing.Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True)
class Config:
    cache_file: pathlib.Path
    log_folder: pathlib.Path | None
    log_level: LogLevel

    def __repr__(self) -> str:
        return (
            f"Config(cache_file={self.cache_file!s}, log_folder={self.log_folder!s}, "
            f"log_level={self.log_level!r})"
        )
