import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_FORMAT = os.getenv("LOG_FORMAT", "%(asctime)s %(levelname)s [%(name)s] %(message)s")

DEFAULT_GRANULARITY = os.getenv("DEFAULT_GRANULARITY", "daily")

# Log every attendance row skipped during ingestion
DATA_QUALITY_WARNINGS = bool(int(os.getenv("DATA_QUALITY_WARNINGS", "1")))
