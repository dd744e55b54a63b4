"""
Database connection settings for the lake sonde data fetch
Values come from the environment, optionally pre-loaded from a local .env file
DO NOT commit .env to version control!
Author: Divya Nayan (divyanayan88@gmail.com)
Copyright: © 2024 Divya Nayan. All rights reserved.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from config.config import ENV_KEYS, REQUIRED_KEYS, DEFAULT_DRIVER
from src.database.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConnectionParameters:
    """Validated settings needed to open one database connection"""

    host: str
    port: str
    database: str
    user: str
    password: str = field(repr=False)
    schema: Optional[str] = None
    driver: str = DEFAULT_DRIVER

    def port_number(self) -> int:
        """Parse the port, rejecting non-numeric or out-of-range values"""
        raw = str(self.port).strip()
        # int() would also take "+5432", "5_432" and non-ASCII digits
        if not (raw.isascii() and raw.isdigit()):
            raise ConfigurationError(
                f"{ENV_KEYS['port']} must be numeric, got '{self.port}'"
            )
        port = int(raw)

        if not 1 <= port <= 65535:
            raise ConfigurationError(
                f"{ENV_KEYS['port']} must be between 1 and 65535, got {port}"
            )
        return port


def load_connection_parameters(environ: Optional[Mapping[str, str]] = None,
                               env_file: Optional[str] = None) -> ConnectionParameters:
    """
    Read connection settings from the environment.

    When ``environ`` is not given, ``env_file`` (or the first .env found
    upward from the working directory) is loaded into ``os.environ`` first;
    variables already set in the process win. Empty or blank values count
    as missing.
    """
    if environ is None:
        load_dotenv(env_file or find_dotenv(usecwd=True), override=False)
        environ = os.environ

    values = {}
    for name, key in ENV_KEYS.items():
        value = environ.get(key)
        # blank means missing; present values are kept verbatim
        values[name] = value if value and value.strip() else None

    missing = [ENV_KEYS[name] for name in REQUIRED_KEYS if values[name] is None]
    if missing:
        raise ConfigurationError(
            "Database credentials are not fully loaded. "
            f"Missing: {', '.join(missing)}. "
            "Please check your .env file and ensure all variables are set."
        )

    if values['schema'] is None:
        logger.warning(f"{ENV_KEYS['schema']} is not set; using the database default schema")

    return ConnectionParameters(
        host=values['host'],
        port=values['port'],
        database=values['database'],
        user=values['user'],
        password=values['password'],
        schema=values['schema'],
        driver=values['driver'] or DEFAULT_DRIVER
    )
