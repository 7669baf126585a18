import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "incentive_test_db"),
}

BONUS_RATES = {
    "rate_permanent": 5000,
    "rate_probation": 3000,
    "rate_daily_worker": 2000,
}

LATE_TOLERANCE_MINUTES = 10
EARLY_BIRD_MINUTES = 30

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
