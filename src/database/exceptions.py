"""
Error types raised while fetching data from the database
Author: Divya Nayan (divyanayan88@gmail.com)
Copyright: © 2024 Divya Nayan. All rights reserved.
"""


class DataFetchError(Exception):
    """Base class for failures that end a fetch run"""

    exit_code = 1


class ConfigurationError(DataFetchError):
    """Required environment value missing or malformed"""

    exit_code = 2


class DatabaseConnectionError(DataFetchError):
    """Driver could not establish or authenticate a session"""

    exit_code = 3


class QueryError(DataFetchError):
    """Database rejected or failed the query"""

    exit_code = 4
