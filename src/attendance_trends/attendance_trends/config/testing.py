LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"

DEFAULT_GRANULARITY = "daily"

DATA_QUALITY_WARNINGS = False
TESTING = True
