import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "incentive"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "incentive_db"),
}

BONUS_RATES = {
    "rate_permanent": int(os.getenv("BONUS_RATE_PERMANENT", "5000")),
    "rate_probation": int(os.getenv("BONUS_RATE_PROBATION", "3000")),
    "rate_daily_worker": int(os.getenv("BONUS_RATE_DAILY_WORKER", "2000")),
}

LATE_TOLERANCE_MINUTES = int(os.getenv("LATE_TOLERANCE_MINUTES", "10"))
EARLY_BIRD_MINUTES = int(os.getenv("EARLY_BIRD_MINUTES", "30"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
