"""
Shared test fixtures and configuration.
"""

import json
import sqlite3
from pathlib import Path

import pytest

from pocketbase_typegen.codegen.core.schema import Collection, Field


@pytest.fixture
def sample_collections() -> list[Collection]:
    """A small schema touching every rendering rule that takes options."""
    return [
        Collection(
            name="posts",
            fields=[
                Field(name="title", type="text", required=True),
                Field(
                    name="status",
                    type="select",
                    required=True,
                    options={"values": ["open", "closed"]},
                ),
                Field(name="cover", type="file", options={"maxSelect": 3}),
                Field(name="2fa", type="bool"),
            ],
        ),
        Collection(
            name="users",
            fields=[
                Field(name="name", type="text"),
                Field(name="avatar", type="file", options={"maxSelect": 1}),
            ],
        ),
        Collection(
            name="user_sessions",
            fields=[
                Field(name="data", type="json"),
                Field(name="user", type="relation", required=True),
            ],
        ),
    ]


@pytest.fixture
def sample_raw_collections(sample_collections) -> list[dict]:
    """The sample schema in the JSON export shape."""
    return [c.to_dict() for c in sample_collections]


@pytest.fixture
def schema_json_file(tmp_path: Path, sample_raw_collections) -> Path:
    """Write the sample schema as a JSON export."""
    path = tmp_path / "pb_schema.json"
    path.write_text(json.dumps(sample_raw_collections), encoding="utf-8")
    return path


@pytest.fixture
def schema_database(tmp_path: Path, sample_raw_collections) -> Path:
    """Create a SQLite database with a PocketBase-like _collections table."""
    path = tmp_path / "data.db"
    connection = sqlite3.connect(path)
    connection.execute(
        "CREATE TABLE _collections ("
        "id TEXT PRIMARY KEY, system BOOLEAN, type TEXT, name TEXT, schema JSON)"
    )
    for index, raw in enumerate(sample_raw_collections):
        connection.execute(
            "INSERT INTO _collections (id, system, type, name, schema) "
            "VALUES (?, ?, ?, ?, ?)",
            (f"col{index}", False, "base", raw["name"], json.dumps(raw["schema"])),
        )
    connection.commit()
    connection.close()
    return path
