import functools
import json
import pathlib
import typing

import pydantic

from colmeta import data

__all__ = ("load",)


@functools.lru_cache(maxsize=1)
def load(*, config_file: pathlib.Path) -> data.Config | data.Error:
    if not config_file.exists():
        return data.Error.new(
            f"The config file specified, {config_file.resolve()!s}, does not exist.",
            config_file=config_file,
        )

    try:
        with config_file.open("r") as fh:
            d = typing.cast(dict[str, typing.Any], json.load(fh))
    except (OSError, json.JSONDecodeError) as e:
        return data.Error.new(
            f"An error occurred while reading the config file: {e}",
            config_file=config_file,
        )

    if not isinstance(d, dict):
        return data.Error.new("The config file must contain a json object.", config_file=config_file)

    if "cache-file" not in d.keys():
        return data.Error.new("config file is missing an entry for 'cache-file'.")

    if "log-folder" not in d.keys():
        return data.Error.new("config file is missing an entry for 'log-folder'.")

    if "log-level" not in d.keys():
        return data.Error.new("config file is missing an entry for 'log-level'.")

    log_folder: typing.Final[str | None] = d["log-folder"]

    try:
        return data.Config(
            cache_file=pathlib.Path(d["cache-file"]),
            log_folder=None if log_folder is None else pathlib.Path(log_folder),
            log_level=d["log-level"],
        )
    except (TypeError, pydantic.ValidationError) as e:
        return data.Error.new(
            f"An error occurred while parsing the config file: {e}",
            config_file=config_file,
        )
