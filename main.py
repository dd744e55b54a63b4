#!/usr/bin/env python3
"""
Lake Sonde Data Fetch
Connects to the database, reads a capped, ordered preview of the YSI 6920
sonde table and prints it
"""

import sys
import logging
from typing import Callable, Mapping, Optional

import pandas as pd

from config.config import LOG_FORMAT
from config.database_config import ConnectionParameters, load_connection_parameters
from src.database import DatabaseConnector, DataFetchError, TableQuery, build_statement, collect
from src.reporting import report_results

# Setup logging
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
logger = logging.getLogger(__name__)


class LakeDataFetchPipeline:
    """Connect, query, report and disconnect for a single run"""

    def __init__(self, params: ConnectionParameters, query: TableQuery,
                 connector_factory: Callable[[ConnectionParameters], DatabaseConnector] = DatabaseConnector,
                 reporter: Callable[[pd.DataFrame, str], None] = report_results):
        self.params = params
        self.query = query
        self.connector_factory = connector_factory
        self.reporter = reporter

    def run(self) -> pd.DataFrame:
        """Run the fetch; the connection is released on every exit path"""
        connector = self.connector_factory(self.params)
        with connector as connection:
            statement = build_statement(self.query, connection)
            local_data = collect(statement, connection)
            self.reporter(local_data, self.query.table)
        return local_data


def main(environ: Optional[Mapping[str, str]] = None,
         connector_factory: Callable[[ConnectionParameters], DatabaseConnector] = DatabaseConnector,
         reporter: Callable[[pd.DataFrame, str], None] = report_results) -> int:
    """Main execution function; returns the process exit code"""
    try:
        params = load_connection_parameters(environ)
        pipeline = LakeDataFetchPipeline(
            params, TableQuery.from_settings(params.schema), connector_factory, reporter
        )
        pipeline.run()
    except DataFetchError as e:
        logger.error(str(e))
        return e.exit_code

    return 0


def cli():
    sys.exit(main())


if __name__ == "__main__":
    cli()
