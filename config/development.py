import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "incentive_db"),
}

# Currency per point, by employment category
BONUS_RATES = {
    "rate_permanent": int(os.getenv("BONUS_RATE_PERMANENT", "5000")),
    "rate_probation": int(os.getenv("BONUS_RATE_PROBATION", "3000")),
    "rate_daily_worker": int(os.getenv("BONUS_RATE_DAILY_WORKER", "2000")),
}

LATE_TOLERANCE_MINUTES = int(os.getenv("LATE_TOLERANCE_MINUTES", "10"))
EARLY_BIRD_MINUTES = int(os.getenv("EARLY_BIRD_MINUTES", "30"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
