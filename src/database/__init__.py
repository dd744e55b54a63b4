"""
Database access modules for the lake sonde data fetch
Author: Divya Nayan (divyanayan88@gmail.com)
Copyright: © 2024 Divya Nayan. All rights reserved.
"""

from .exceptions import DataFetchError, ConfigurationError, DatabaseConnectionError, QueryError
from .connector import DatabaseConnector, get_connection_url
from .query import TableQuery, build_statement, collect, run_query, read_full_table

__all__ = [
    'DataFetchError', 'ConfigurationError', 'DatabaseConnectionError', 'QueryError',
    'DatabaseConnector', 'get_connection_url',
    'TableQuery', 'build_statement', 'collect', 'run_query', 'read_full_table'
]
