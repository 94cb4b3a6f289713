import decimal
import json
import pathlib
import typing

import pytest

from colmeta import data


@pytest.fixture(scope="function")
def customer_id_editor_fixture() -> data.ColumnEditor:
    return (
        data.ColumnEditor()
        .set_name("customer_id")
        .set_position(1)
        .set_jdbc_type(data.JdbcType.INTEGER)
        .set_native_type(3)
        .set_type("INT", "INT(11)")
        .set_optional(False)
        .set_auto_incremented(True)
    )


@pytest.fixture(scope="function")
def purchases_column_fixture() -> data.Column:
    return (
        data.ColumnEditor()
        .set_name("purchases")
        .set_position(6)
        .set_jdbc_type(data.JdbcType.DECIMAL)
        .set_native_type(246)
        .set_type("DECIMAL", "DECIMAL(18,2)")
        .set_length(18)
        .set_scale(2)
        .set_optional(False)
        .set_default_value(decimal.Decimal("0.00"))
        .set_default_value_expression("0.00")
        .set_comment("lifetime purchases")
        .create()
    )


@pytest.fixture(scope="function")
def customer_columns_fixture() -> tuple[data.Column, ...]:
    return (
        data.ColumnEditor()
        .set_name("customer_id")
        .set_position(1)
        .set_jdbc_type(data.JdbcType.INTEGER)
        .set_type("INT")
        .set_auto_incremented(True)
        .create(),
        data.ColumnEditor()
        .set_name("first_name")
        .set_position(2)
        .set_jdbc_type(data.JdbcType.VARCHAR)
        .set_type("VARCHAR", "VARCHAR(100)")
        .set_length(100)
        .set_charset_name_of_table("utf8mb4")
        .create(),
        data.ColumnEditor()
        .set_name("middle_name")
        .set_position(3)
        .set_jdbc_type(data.JdbcType.VARCHAR)
        .set_type("VARCHAR", "VARCHAR(100)")
        .set_length(100)
        .set_optional(True)
        .set_default_value(None)
        .set_default_value_expression("NULL")
        .create(),
        data.ColumnEditor()
        .set_name("status")
        .set_position(4)
        .set_jdbc_type(data.JdbcType.CHAR)
        .set_type("ENUM", "ENUM('A','B')")
        .set_length(1)
        .set_enum_values(["A", "B"])
        .set_default_value("A")
        .set_default_value_expression("'A'")
        .create(),
    )


@pytest.fixture(scope="function")
def cache_file_fixture(tmp_path: pathlib.Path) -> pathlib.Path:
    return tmp_path / "cache.json"


@pytest.fixture(scope="function")
def config_file_fixture(tmp_path: pathlib.Path) -> typing.Callable[[dict[str, typing.Any]], pathlib.Path]:
    def write(d: dict[str, typing.Any], /) -> pathlib.Path:
        path = tmp_path / "config.json"
        with path.open("w") as fh:
            json.dump(d, fh)
        return path

    return write
