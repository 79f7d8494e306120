import os

SECRET_KEY = "test-secret"

STORE_BACKEND = "file"
STORE_DIR = os.getenv("STORE_DIR", "instance/test-store")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hajj_dashboard_test"),
}

MEDIA_UPLOAD_DIR = None
MEDIA_BASE_URL = "/media"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
