from __future__ import annotations

import dataclasses
import typing

import pydantic

from colmeta.data.jdbc_type import CHARSET_JDBC_TYPES

if typing.TYPE_CHECKING:
    from colmeta.data.column_editor import ColumnEditor

__all__ = ("Column",)


@pydantic.dataclasses.dataclass(frozen=True, kw_only=True, config=pydantic.ConfigDict(strict=True))
class Column:
    """Immutable definition of a single table column.

    Instances are produced by ``ColumnEditor.create()``.  ``scale`` is ``None`` when the column has no
    scale, which is not the same thing as a scale of 0.  ``has_default_value`` is ``True`` only when a
    default was explicitly set, so ``has_default_value=True, default_value=None`` means "DEFAULT NULL".
    ``charset_name_of_table`` is kept next to ``charset_name`` and never overrides it.
    """

    name: str | None
    position: int
    jdbc_type: int
    native_type: int
    type_name: str | None
    type_expression: str | None
    charset_name: str | None
    charset_name_of_table: str | None
    length: int
    scale: int | None
    optional: bool
    auto_incremented: bool
    generated: bool
    default_value_expression: str | None
    default_value: typing.Any = dataclasses.field(hash=False)
    has_default_value: bool
    enum_values: tuple[str, ...]
    comment: str | None

    def edit(self) -> ColumnEditor:
        """Return a new editor pre-populated with this column's definition."""
        from colmeta.data.column_editor import ColumnEditor

        return ColumnEditor.from_column(self)

    def type_uses_charset(self) -> bool:
        return self.jdbc_type in CHARSET_JDBC_TYPES

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Column):
            return NotImplemented
        return self.position < other.position

    def __str__(self) -> str:
        parts = [f"{self.name} {self.type_name}"]
        if self.length > 0:
            if self.scale is None:
                parts.append(f"({self.length})")
            else:
                parts.append(f"({self.length}, {self.scale})")

        if self.charset_name:
            parts.append(f" CHARSET {self.charset_name}")

        if not self.optional:
            parts.append(" NOT NULL")

        if self.auto_incremented:
            parts.append(" AUTO_INCREMENTED")

        if self.generated:
            parts.append(" GENERATED")

        if self.has_default_value:
            if self.default_value_expression is not None:
                parts.append(f" DEFAULT VALUE {self.default_value_expression}")
            elif self.default_value is None:
                parts.append(" DEFAULT VALUE NULL")
            else:
                parts.append(f" DEFAULT VALUE {self.default_value}")

        return "".join(parts)
