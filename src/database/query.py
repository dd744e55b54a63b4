"""
Lazy table queries for the lake sonde data fetch
A TableQuery only describes the read. build_statement turns it into one
SQL statement and collect is the single point where rows are fetched.
Author: Divya Nayan (divyanayan88@gmail.com)
Copyright: © 2024 Divya Nayan. All rights reserved.
"""

import logging
import operator
from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

import pandas as pd
from sqlalchemy import MetaData, Select, Table, select
from sqlalchemy.engine import Connection
from sqlalchemy.exc import NoSuchTableError, SQLAlchemyError

from config.config import QUERY_CONFIG
from .exceptions import QueryError

logger = logging.getLogger(__name__)

FILTER_OPERATORS = {
    '==': operator.eq,
    '!=': operator.ne,
    '<': operator.lt,
    '<=': operator.le,
    '>': operator.gt,
    '>=': operator.ge
}


@dataclass(frozen=True)
class TableQuery:
    """Description of a read against one schema-qualified table"""

    table: str
    schema: Optional[str] = None
    columns: Tuple[str, ...] = ()
    order_by: Optional[str] = None
    limit: Optional[int] = None
    filters: Tuple[Tuple[str, str, Any], ...] = ()

    @classmethod
    def from_settings(cls, schema: Optional[str]) -> 'TableQuery':
        """Default read: projected columns, ascending sort, row cap"""
        return (cls(QUERY_CONFIG['table'], schema)
                .select(*QUERY_CONFIG['columns'])
                .arrange(QUERY_CONFIG['order_by'])
                .head(QUERY_CONFIG['limit']))

    @property
    def qualified_name(self) -> str:
        return f"{self.schema}.{self.table}" if self.schema else self.table

    def select(self, *columns: str) -> 'TableQuery':
        if not columns:
            raise ValueError("select() needs at least one column")
        return replace(self, columns=tuple(columns))

    def arrange(self, column: str) -> 'TableQuery':
        return replace(self, order_by=column)

    def head(self, n: int) -> 'TableQuery':
        if isinstance(n, bool) or not isinstance(n, int) or n < 1:
            raise ValueError(f"Row limit must be a positive integer, got {n!r}")
        return replace(self, limit=n)

    def where(self, column: str, op: str, value: Any) -> 'TableQuery':
        if op not in FILTER_OPERATORS:
            raise ValueError(f"Unsupported filter operator '{op}'")
        return replace(self, filters=self.filters + ((column, op, value),))


def _reflect_table(connection: Connection, table: str, schema: Optional[str]) -> Table:
    return Table(table, MetaData(), schema=schema, autoload_with=connection)


def _column(table: Table, name: str):
    try:
        return table.c[name]
    except KeyError:
        raise QueryError(
            f"Error during database query or data processing: "
            f"column '{name}' not found in table '{table.fullname}'"
        ) from None


def build_statement(query: TableQuery, connection: Connection) -> Select:
    """Translate the query into a SELECT without fetching any rows"""
    try:
        table = _reflect_table(connection, query.table, query.schema)
    except NoSuchTableError:
        raise QueryError(
            f"Error during database query or data processing: "
            f"table '{query.qualified_name}' does not exist"
        ) from None
    except SQLAlchemyError as e:
        raise QueryError(f"Error during database query or data processing: {e}") from e

    if query.columns:
        stmt = select(*[_column(table, name) for name in query.columns])
    else:
        stmt = select(table)

    for name, op, value in query.filters:
        stmt = stmt.where(FILTER_OPERATORS[op](_column(table, name), value))

    if query.order_by is not None:
        stmt = stmt.order_by(_column(table, query.order_by).asc())

    if query.limit is not None:
        stmt = stmt.limit(query.limit)

    return stmt


def compile_sql(statement: Select, connection: Connection) -> str:
    """Render the statement in the connection's SQL dialect"""
    return str(statement.compile(dialect=connection.dialect))


def collect(statement: Select, connection: Connection) -> pd.DataFrame:
    """Execute the statement and pull the results into memory"""
    logger.debug(f"Executing query:\n{compile_sql(statement, connection)}")
    try:
        result = connection.execute(statement)
        return pd.DataFrame(result.fetchall(), columns=list(result.keys()))
    except SQLAlchemyError as e:
        raise QueryError(f"Error during database query or data processing: {e}") from e


def run_query(query: TableQuery, connection: Connection) -> pd.DataFrame:
    """Build and collect a query in one call"""
    statement = build_statement(query, connection)
    return collect(statement, connection)


def read_full_table(connection: Connection, table: str, schema: Optional[str] = None) -> pd.DataFrame:
    """Read an entire table without projection, sort or row cap"""
    try:
        return pd.read_sql_table(table, connection, schema=schema)
    # pandas reports a missing table as ValueError
    except (ValueError, SQLAlchemyError) as e:
        raise QueryError(f"Error during database query or data processing: {e}") from e
