#!/usr/bin/env python3
"""
Full Table Read Script
Reads the whole sonde table without projection, ordering or row cap
Use only on tables small enough to hold in memory
Run from the project root: python -m scripts.read_full_table
"""

import sys
import logging

from config.config import QUERY_CONFIG, LOG_FORMAT
from config.database_config import load_connection_parameters
from src.database import ConfigurationError, DatabaseConnector, DataFetchError, read_full_table
from src.reporting import report_results

# Setup logging
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def main(environ=None, connector_factory=DatabaseConnector):
    """Main function to read the entire table"""
    table_name = QUERY_CONFIG['table']

    try:
        params = load_connection_parameters(environ)
        with connector_factory(params) as connection:
            all_data = read_full_table(connection, table_name, params.schema)
            logger.info(f"Read entire table '{table_name}' directly.")
            report_results(all_data, table_name)
    except ConfigurationError as e:
        logger.error(str(e))
        logger.error("Please create a .env file with database credentials (see .env.example)")
        return e.exit_code
    except DataFetchError as e:
        logger.error(str(e))
        return e.exit_code

    return 0


if __name__ == "__main__":
    sys.exit(main())
