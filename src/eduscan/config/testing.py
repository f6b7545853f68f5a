DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Tests never touch disk or MySQL unless they ask for it.
STORE_BACKEND = "memory"
DATA_DIR = "data"
STORE_PREFIX = "eduscan"

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "eduscan_test",
}

AUTO_INIT_DB = False

GROQ_API_KEY = ""
GROQ_MODEL = "llama-3.1-8b-instant"

LATE_CUTOFF_HOUR = 9
RESCAN_WINDOW_SECONDS = 3

CAMERA_INDEX = 0
SCAN_FPS = 10
SCAN_BOX_SIZE = 250
