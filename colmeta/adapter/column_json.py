import typing

from colmeta import data

__all__ = ("from_dict", "to_dict")


def to_dict(column: data.Column, /) -> dict[str, typing.Any]:
    d: dict[str, typing.Any] = {
        "name": column.name,
        "position": column.position,
        "jdbc-type": column.jdbc_type,
        "native-type": column.native_type,
        "type-name": column.type_name,
        "type-expression": column.type_expression,
        "charset-name": column.charset_name,
        "charset-name-of-table": column.charset_name_of_table,
        "length": column.length,
        "scale": column.scale,
        "optional": column.optional,
        "auto-incremented": column.auto_incremented,
        "generated": column.generated,
        "comment": column.comment,
        "has-default-value": column.has_default_value,
        "default-value-expression": column.default_value_expression,
        "enum-values": list(column.enum_values),
    }
    if column.has_default_value:
        d["default-value"] = column.default_value
    return d


def from_dict(d: dict[str, typing.Any], /) -> data.Column | data.Error:
    if not isinstance(d, dict):
        return data.Error.new(f"Expected a column definition dict, but got {type(d).__name__}.")

    enum_values = d.get("enum-values", [])
    if not isinstance(enum_values, list):
        return data.Error.new(
            f"Expected enum-values to be a list, but got {enum_values!r}.",
            column_name=d.get("name"),
        )

    try:
        editor = (
            data.ColumnEditor()
            .set_name(d.get("name"))
            .set_position(d.get("position", 0))
            .set_jdbc_type(d.get("jdbc-type", 0))
            .set_native_type(d.get("native-type", 0))
            .set_type(d.get("type-name"), d.get("type-expression"))
            .set_charset_name(d.get("charset-name"))
            .set_charset_name_of_table(d.get("charset-name-of-table"))
            .set_length(d.get("length", 0))
            .set_scale(d.get("scale"))
            .set_optional(d.get("optional", False))
            .set_auto_incremented(d.get("auto-incremented", False))
            .set_generated(d.get("generated", False))
            .set_default_value_expression(d.get("default-value-expression"))
            .set_enum_values(enum_values)
            .set_comment(d.get("comment"))
        )
        if d.get("has-default-value", False) is True:
            editor.set_default_value(d.get("default-value"))

        return editor.create()
    except Exception as e:
        return data.Error.new(str(e), column_name=d.get("name"))
