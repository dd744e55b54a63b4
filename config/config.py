"""
Configuration settings for the lake sonde data fetch
Author: Divya Nayan (divyanayan88@gmail.com)
Copyright: © 2024 Divya Nayan. All rights reserved.
"""

# Environment variable names
ENV_KEYS = {
    'host': 'DB_HOST',
    'port': 'DB_PORT',
    'database': 'DB_NAME',
    'user': 'DB_USER',
    'password': 'DB_PASSWORD',
    'schema': 'DB_SCHEMA',
    'driver': 'DB_DRIVER'
}

# Values that must be present before a connection is attempted
REQUIRED_KEYS = ['host', 'port', 'database', 'user', 'password']

DEFAULT_DRIVER = 'postgresql+psycopg2'

# Query configuration
QUERY_CONFIG = {
    'table': 'lake_ysi_6920',
    'columns': ('ts_lpk', 'temperature', 'specific_conductivity'),
    'order_by': 'ts_lpk',
    'limit': 100
}

# Rows shown in the printed preview
PREVIEW_ROWS = 6

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
