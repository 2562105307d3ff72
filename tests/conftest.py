from __future__ import annotations

import sqlite3
from collections.abc import Generator
from pathlib import Path

import pytest

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture
def sqlite_connection() -> Generator[sqlite3.Connection, None, None]:
    connection = sqlite3.connect(":memory:")
    connection.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT NOT NULL, age INTEGER, status TEXT)")
    connection.executemany(
        "INSERT INTO users (id, name, age, status) VALUES (?, ?, ?, ?)",
        [(1, "ann", 31, "active"), (2, "bob", 17, "active"), (3, "cid", 45, "banned"), (4, "dee", 22, "banned")],
    )
    connection.commit()
    try:
        yield connection
    finally:
        connection.close()
