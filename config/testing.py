import os

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shift_management_test"),
}

DEFAULT_HOURLY_WAGE = 1000

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
