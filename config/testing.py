from config.config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "test-password"
ADMIN_PASSWORD_HASH = ""

DB_CONFIG = {**DB_CONFIG, "database": "worklog_test"}  # noqa: F405

AUTO_INIT_DB = False
AUTO_SEED_DB = False
