import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "geo_attendance"),
}

AREA_CENTER_LAT = float(os.getenv("AREA_CENTER_LAT", "13.7563"))
AREA_CENTER_LNG = float(os.getenv("AREA_CENTER_LNG", "100.5018"))
AREA_RADIUS_KM = float(os.getenv("AREA_RADIUS_KM", "0.5"))

LATE_THRESHOLD = os.getenv("LATE_THRESHOLD", "08:30")

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
