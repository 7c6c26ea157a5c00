import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)s [%(name)s] %(message)s")

DEFAULT_GRANULARITY = os.getenv("DEFAULT_GRANULARITY", "daily")

DATA_QUALITY_WARNINGS = bool(int(os.getenv("DATA_QUALITY_WARNINGS", "1")))
