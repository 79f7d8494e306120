import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# "file" keeps one JSON blob per partition under STORE_DIR; "mysql" uses the kv_store table.
STORE_BACKEND = os.getenv("STORE_BACKEND", "file")
STORE_DIR = os.getenv("STORE_DIR", "instance/store")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hajj_dashboard"),
}

# Optional image uploads; leave MEDIA_UPLOAD_DIR empty to save records without images.
MEDIA_UPLOAD_DIR = os.getenv("MEDIA_UPLOAD_DIR", "instance/media")
MEDIA_BASE_URL = os.getenv("MEDIA_BASE_URL", "/media")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled (mysql backend only), app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
