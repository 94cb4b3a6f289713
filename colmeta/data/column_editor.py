from __future__ import annotations

import copy
import dataclasses
import typing

from loguru import logger

from colmeta.data.column import Column

__all__ = ("ColumnEditor", "DefaultValue")


@dataclasses.dataclass(frozen=True)
class DefaultValue:
    """An explicitly set default; ``DefaultValue(None)`` is a default of NULL."""

    value: typing.Any


_KEEP: typing.Final = object()


class ColumnEditor:
    """Mutable builder for a ``Column``.

    Catalog fields can be set in any order and any number of times, the last write wins.  Every setter
    returns the editor, so calls can be chained:

        col = ColumnEditor().set_name("status").set_type("ENUM").set_enum_values(["A", "B"]).create()

    ``create()`` can be called repeatedly; each call returns an independent snapshot and the editor stays
    usable.  An editor is meant to be owned by a single caller and does no locking.
    """

    def __init__(self) -> None:
        self._name: str | None = None
        self._position: int = 0
        self._jdbc_type: int = 0
        self._native_type: int = 0
        self._type_name: str | None = None
        self._type_expression: str | None = None
        self._charset_name: str | None = None
        self._charset_name_of_table: str | None = None
        self._length: int = 0
        self._scale: int | None = None
        self._optional: bool = False
        self._auto_incremented: bool = False
        self._generated: bool = False
        self._default_value_expression: str | None = None
        self._default: DefaultValue | None = None
        self._enum_values: tuple[str, ...] = ()
        self._comment: str | None = None

    @staticmethod
    def from_column(column: Column, /) -> ColumnEditor:
        editor = (
            ColumnEditor()
            .set_name(column.name)
            .set_position(column.position)
            .set_jdbc_type(column.jdbc_type)
            .set_native_type(column.native_type)
            .set_type(column.type_name, column.type_expression)
            .set_charset_name(column.charset_name)
            .set_charset_name_of_table(column.charset_name_of_table)
            .set_length(column.length)
            .set_scale(column.scale)
            .set_optional(column.optional)
            .set_auto_incremented(column.auto_incremented)
            .set_generated(column.generated)
            .set_default_value_expression(column.default_value_expression)
            .set_enum_values(column.enum_values)
            .set_comment(column.comment)
        )
        if column.has_default_value:
            editor.set_default_value(copy.deepcopy(column.default_value))
        return editor

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def position(self) -> int:
        return self._position

    @property
    def jdbc_type(self) -> int:
        return self._jdbc_type

    @property
    def native_type(self) -> int:
        return self._native_type

    @property
    def type_name(self) -> str | None:
        return self._type_name

    @property
    def type_expression(self) -> str | None:
        return self._type_expression

    @property
    def charset_name(self) -> str | None:
        return self._charset_name

    @property
    def charset_name_of_table(self) -> str | None:
        return self._charset_name_of_table

    @property
    def length(self) -> int:
        return self._length

    @property
    def scale(self) -> int | None:
        return self._scale

    @property
    def optional(self) -> bool:
        return self._optional

    @property
    def auto_incremented(self) -> bool:
        return self._auto_incremented

    @property
    def generated(self) -> bool:
        return self._generated

    @property
    def default_value_expression(self) -> str | None:
        return self._default_value_expression

    @property
    def default_value(self) -> typing.Any:
        if self._default is None:
            return None
        return self._default.value

    @property
    def has_default_value(self) -> bool:
        return self._default is not None

    @property
    def enum_values(self) -> tuple[str, ...]:
        return self._enum_values

    @property
    def comment(self) -> str | None:
        return self._comment

    def set_name(self, name: str | None, /) -> ColumnEditor:
        self._name = name
        return self

    def set_position(self, position: int, /) -> ColumnEditor:
        self._position = position
        return self

    def set_jdbc_type(self, jdbc_type: int, /) -> ColumnEditor:
        self._jdbc_type = jdbc_type
        return self

    def set_native_type(self, native_type: int, /) -> ColumnEditor:
        self._native_type = native_type
        return self

    def set_type(
        self,
        type_name: str | None,
        type_expression: str | None | object = _KEEP,
        /,
    ) -> ColumnEditor:
        """Set the type name, and the full type expression when one is given.

        With a single argument the current type expression is left as it is.
        """
        self._type_name = type_name
        if type_expression is not _KEEP:
            self._type_expression = typing.cast(str | None, type_expression)
        return self

    def set_charset_name(self, charset_name: str | None, /) -> ColumnEditor:
        self._charset_name = charset_name
        return self

    def set_charset_name_of_table(self, charset_name: str | None, /) -> ColumnEditor:
        self._charset_name_of_table = charset_name
        return self

    def set_length(self, length: int, /) -> ColumnEditor:
        self._length = length
        return self

    def set_scale(self, scale: int | None, /) -> ColumnEditor:
        self._scale = scale
        return self

    def set_optional(self, optional: bool, /) -> ColumnEditor:
        self._optional = optional
        return self

    def set_auto_incremented(self, auto_incremented: bool, /) -> ColumnEditor:
        self._auto_incremented = auto_incremented
        return self

    def set_generated(self, generated: bool, /) -> ColumnEditor:
        self._generated = generated
        return self

    def set_default_value(self, default_value: typing.Any, /) -> ColumnEditor:
        self._default = DefaultValue(default_value)
        return self

    def set_default_value_expression(self, default_value_expression: str | None, /) -> ColumnEditor:
        self._default_value_expression = default_value_expression
        return self

    def unset_default_value(self) -> ColumnEditor:
        self._default = None
        return self

    def unset_default_value_expression(self) -> ColumnEditor:
        self._default_value_expression = None
        return self

    def set_enum_values(self, enum_values: typing.Iterable[str], /) -> ColumnEditor:
        self._enum_values = tuple(enum_values)
        return self

    def set_comment(self, comment: str | None, /) -> ColumnEditor:
        self._comment = comment
        return self

    def create(self) -> Column:
        column = Column(
            name=self._name,
            position=self._position,
            jdbc_type=self._jdbc_type,
            native_type=self._native_type,
            type_name=self._type_name,
            type_expression=self._type_expression,
            charset_name=self._charset_name,
            charset_name_of_table=self._charset_name_of_table,
            length=self._length,
            scale=self._scale,
            optional=self._optional,
            auto_incremented=self._auto_incremented,
            generated=self._generated,
            default_value_expression=self._default_value_expression,
            default_value=copy.deepcopy(self.default_value),
            has_default_value=self.has_default_value,
            enum_values=self._enum_values,
            comment=self._comment,
        )
        logger.debug("Created column definition, {}, at position {}.", column, column.position)
        return column

    def __repr__(self) -> str:
        return f"ColumnEditor(name={self._name!r}, position={self._position})"
