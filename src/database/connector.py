"""
Database connection lifecycle for the lake sonde data fetch
Author: Divya Nayan (divyanayan88@gmail.com)
Copyright: © 2024 Divya Nayan. All rights reserved.
"""

import logging
from typing import Callable, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from .exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


def get_connection_url(params) -> URL:
    """Get SQLAlchemy connection URL; the port is validated first"""
    return URL.create(
        params.driver,
        username=params.user,
        password=params.password,
        host=params.host,
        port=params.port_number(),
        database=params.database
    )


class DatabaseConnector:
    """Own a single database connection and release it exactly once"""

    def __init__(self, params, engine_factory: Callable[..., Engine] = create_engine):
        self.params = params
        self.engine_factory = engine_factory
        self.engine: Optional[Engine] = None
        self.connection: Optional[Connection] = None

    @property
    def is_connected(self) -> bool:
        return self.connection is not None

    def connect(self) -> Connection:
        """Create the engine and open the connection"""
        if self.connection is not None:
            return self.connection

        url = get_connection_url(self.params)
        logger.info(f"Connecting to database: {url.render_as_string(hide_password=True)}")

        try:
            self.engine = self.engine_factory(url)
            self.connection = self.engine.connect()
        except SQLAlchemyError as e:
            self._dispose_engine()
            raise DatabaseConnectionError(f"Failed to connect to the database: {e}") from e

        logger.info("Successfully connected to the database!")
        return self.connection

    def disconnect(self):
        """Close the connection; later calls are no-ops"""
        if self.connection is None:
            return

        connection, self.connection = self.connection, None
        try:
            connection.close()
        finally:
            self._dispose_engine()
        logger.info("Disconnected from the database.")

    def _dispose_engine(self):
        if self.engine is not None:
            engine, self.engine = self.engine, None
            engine.dispose()

    def __enter__(self) -> Connection:
        return self.connect()

    def __exit__(self, exc_type, exc_value, traceback):
        self.disconnect()
        return False
