"""
Result reporting for the lake sonde data fetch
Author: Divya Nayan (divyanayan88@gmail.com)
Copyright: © 2024 Divya Nayan. All rights reserved.
"""

import sys
import logging
from typing import Optional, TextIO

import pandas as pd

from config.config import PREVIEW_ROWS

logger = logging.getLogger(__name__)


def report_results(df: pd.DataFrame, table_name: str, preview_rows: int = PREVIEW_ROWS,
                   stream: Optional[TextIO] = None):
    """Log the row count and print a preview of the first rows"""
    stream = stream if stream is not None else sys.stdout

    logger.info(f"Successfully queried table '{table_name}'. Retrieved {len(df)} rows.")

    if df.empty:
        print("(no rows)", file=stream)
    else:
        print(df.head(preview_rows).to_string(index=False), file=stream)
