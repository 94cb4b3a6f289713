import json
import pathlib
import typing

from loguru import logger

from colmeta import data
from colmeta.adapter import column_json

__all__ = ("FsCache",)


class FsCache(data.Cache):
    """Column definitions cached in a single json file, keyed by table name."""

    def __init__(self, cache_file: pathlib.Path) -> None:
        self._cache_file: typing.Final[pathlib.Path] = cache_file

    def add_columns(self, *, table_name: str, columns: typing.Iterable[data.Column]) -> None | data.Error:
        try:
            tables = self._read()
            tables[table_name] = [column_json.to_dict(col) for col in sorted(columns)]
            contents = json.dumps(tables, indent=2)
            self._cache_file.write_text(contents)
            logger.debug(f"Cached {len(tables[table_name])} column definitions for {table_name}.")
            return None
        except Exception as e:
            logger.error(f"An error occurred while caching columns for {table_name}: {e}")
            return data.Error.new(str(e), table_name=table_name)

    def get_columns(self, *, table_name: str) -> tuple[data.Column, ...] | None | data.Error:
        try:
            tables = self._read()
        except data.ColMetaError as e:
            return data.Error.new(str(e), table_name=table_name)

        if table_name not in tables:
            return None

        col_dicts = tables[table_name]
        if not isinstance(col_dicts, list):
            return data.Error.new(
                f"Expected the cached entry for {table_name} to be a list of columns, but got {col_dicts!r}.",
                table_name=table_name,
            )

        columns: list[data.Column] = []
        for col_dict in col_dicts:
            col = column_json.from_dict(col_dict)
            if isinstance(col, data.Error):
                return col
            columns.append(col)

        return tuple(sorted(columns))

    def _read(self) -> dict[str, list[dict[str, typing.Any]]]:
        if not self._cache_file.exists():
            return {}

        try:
            with self._cache_file.open("r") as fh:
                tables = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            raise data.CacheFileCorrupt(cache_file=str(self._cache_file), reason=str(e)) from e

        if not isinstance(tables, dict):
            raise data.CacheFileCorrupt(
                cache_file=str(self._cache_file),
                reason="expected a json object keyed by table name",
            )

        return tables
