import os

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

STORE_BACKEND = os.getenv("STORE_BACKEND", "mysql")
DATA_DIR = os.getenv("DATA_DIR", "data")
STORE_PREFIX = os.getenv("STORE_PREFIX", "eduscan")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "eduscan"),
}

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

GROQ_API_KEY = os.getenv("GROQ_API_KEY", "")
GROQ_MODEL = os.getenv("GROQ_MODEL", "llama-3.1-8b-instant")

LATE_CUTOFF_HOUR = int(os.getenv("LATE_CUTOFF_HOUR", "9"))
RESCAN_WINDOW_SECONDS = float(os.getenv("RESCAN_WINDOW_SECONDS", "3"))

CAMERA_INDEX = int(os.getenv("CAMERA_INDEX", "0"))
SCAN_FPS = int(os.getenv("SCAN_FPS", "10"))
SCAN_BOX_SIZE = int(os.getenv("SCAN_BOX_SIZE", "250"))
