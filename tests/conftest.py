import random
from datetime import datetime, timedelta

import pytest
from sqlalchemy import Column, DateTime, Float, Integer, MetaData, Table, create_engine, event
from sqlalchemy.pool import StaticPool

from config.config import ENV_KEYS, QUERY_CONFIG
from config.database_config import ConnectionParameters

SCHEMA = "test_schema"
START = datetime(2024, 6, 1)


def sonde_rows(n_rows):
    """Rows with distinct timestamps, inserted out of order"""
    rows = [
        {
            "id": i + 1,
            "ts_lpk": START + timedelta(minutes=15 * i),
            "temperature": 12.0 + i * 0.01,
            "specific_conductivity": 300.0 + i,
            "depth": 1.5,
        }
        for i in range(n_rows)
    ]
    random.Random(42).shuffle(rows)
    return rows


def make_sonde_engine(n_rows=None):
    """In-memory SQLite engine with ``test_schema`` attached.

    When ``n_rows`` is None the schema is left empty.
    """
    engine = create_engine("sqlite://", poolclass=StaticPool)

    @event.listens_for(engine, "connect")
    def attach_schema(dbapi_connection, connection_record):
        dbapi_connection.execute(f"ATTACH DATABASE ':memory:' AS {SCHEMA}")

    if n_rows is not None:
        metadata = MetaData()
        table = Table(
            QUERY_CONFIG["table"],
            metadata,
            Column("id", Integer, primary_key=True),
            Column("ts_lpk", DateTime),
            Column("temperature", Float),
            Column("specific_conductivity", Float),
            Column("depth", Float),
            schema=SCHEMA,
        )
        metadata.create_all(engine)
        if n_rows:
            with engine.begin() as conn:
                conn.execute(table.insert(), sonde_rows(n_rows))
    return engine


@pytest.fixture
def env_values():
    return {
        "DB_HOST": "db.example.org",
        "DB_PORT": "5432",
        "DB_NAME": "limnology",
        "DB_USER": "reader",
        "DB_PASSWORD": "s3cret",
        "DB_SCHEMA": SCHEMA,
    }


@pytest.fixture
def params():
    return ConnectionParameters(
        host="db.example.org",
        port="5432",
        database="limnology",
        user="reader",
        password="s3cret",
        schema=SCHEMA,
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove DB_* variables; anything loaded during the test is undone"""
    for key in ENV_KEYS.values():
        monkeypatch.setenv(key, "placeholder")
        monkeypatch.delenv(key)
    return monkeypatch


@pytest.fixture
def sonde_engine():
    return make_sonde_engine(150)


@pytest.fixture
def sonde_engine_factory():
    return make_sonde_engine
