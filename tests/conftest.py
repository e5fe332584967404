"""Shared fixtures: small schemas and the catalogs built from them."""

from __future__ import annotations

import copy
import json

import pytest

from infoschema.catalog import InformationSchemaCatalog
from infoschema.schema import Column, KeyColumn, Schema, Table
from infoschema.snapshot import schema_from_dict
from infoschema.types import ColumnType, TypeCode

MUSIC_SNAPSHOT = {
    "tables": [
        {
            "name": "Singers",
            "columns": [
                {"name": "SingerId", "type": "INT64", "nullable": False},
                {"name": "FirstName", "type": "STRING(1024)"},
                {"name": "LastName", "type": "STRING(1024)", "nullable": False},
                {
                    "name": "FullName",
                    "type": "STRING(MAX)",
                    "generated": "(FirstName || ' ' || LastName)",
                    "depends_on": ["FirstName", "LastName"],
                },
                {"name": "Nickname", "type": "STRING(MAX)", "default": "('none')"},
                {"name": "LastUpdated", "type": "TIMESTAMP", "allow_commit_timestamp": True},
            ],
            "primary_key": ["SingerId"],
            "row_deletion_policy": {"column": "LastUpdated", "days": 30},
            "indexes": [
                {
                    "name": "SingersByLastName",
                    "columns": [{"column": "LastName", "descending": True}],
                    "storing": ["FirstName"],
                    "unique": True,
                    "null_filtered": True,
                },
            ],
            "check_constraints": [
                {"name": "CK_SingerId_positive", "expression": "SingerId > 0", "columns": ["SingerId"]},
            ],
        },
        {
            "name": "Albums",
            "columns": [
                {"name": "SingerId", "type": "INT64", "nullable": False},
                {"name": "AlbumId", "type": "INT64", "nullable": False},
                {"name": "Title", "type": "STRING(MAX)"},
                {"name": "Tags", "type": "ARRAY<STRING(64)>"},
            ],
            "primary_key": ["SingerId", {"column": "AlbumId", "descending": True}],
            "parent": "Singers",
            "on_delete": "CASCADE",
            "indexes": [
                {"name": "AlbumsByTitle", "columns": ["Title"], "interleave_in": "Singers"},
            ],
        },
        {
            "name": "Concerts",
            "columns": [
                {"name": "ConcertId", "type": "INT64", "nullable": False},
                {"name": "SingerLastName", "type": "STRING(1024)"},
                {"name": "SingerId", "type": "INT64"},
            ],
            "primary_key": ["ConcertId"],
            "foreign_keys": [
                {
                    "name": "FK_Concerts_Singers",
                    "columns": ["SingerId"],
                    "referenced_table": "Singers",
                    "referenced_columns": ["SingerId"],
                },
                {
                    "name": "FK_Concerts_SingerName",
                    "columns": ["SingerLastName"],
                    "referenced_table": "Singers",
                    "referenced_columns": ["LastName"],
                    "referenced_index": "SingersByLastName",
                },
            ],
        },
    ]
}


@pytest.fixture
def music_snapshot():
    """A fresh copy of the music snapshot dict."""
    return copy.deepcopy(MUSIC_SNAPSHOT)


@pytest.fixture
def music_schema(music_snapshot):
    """Schema with interleaving, indexes, foreign keys and checks."""
    return schema_from_dict(music_snapshot)


@pytest.fixture
def music_catalog(music_schema):
    """Catalog built from the music schema."""
    return InformationSchemaCatalog(music_schema)


@pytest.fixture
def snapshot_file(tmp_path, music_snapshot):
    """The music snapshot written to a JSON file."""
    path = tmp_path / "music.json"
    path.write_text(json.dumps(music_snapshot))
    return path


@pytest.fixture
def users_schema():
    """Users(id INT64, email STRING, age INT64), keyed on id, email NOT NULL."""
    user_id = Column(name="id", type=ColumnType(TypeCode.INT64), is_nullable=False)
    email = Column(name="email", type=ColumnType(TypeCode.STRING), is_nullable=False)
    age = Column(name="age", type=ColumnType(TypeCode.INT64))
    users = Table(
        name="Users",
        columns=[user_id, email, age],
        primary_key=[KeyColumn(column=user_id)],
    )
    return Schema([users])


@pytest.fixture
def users_catalog(users_schema):
    return InformationSchemaCatalog(users_schema)


@pytest.fixture
def empty_catalog():
    """Catalog of a schema without user tables."""
    return InformationSchemaCatalog(Schema())
