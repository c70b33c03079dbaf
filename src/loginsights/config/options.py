"""Shared CLI/config option sets.

Keep these centralized so CLI choices and config validation stay in sync.
"""

TIME_RANGES = (7, 30, 90)
DEFAULT_TIME_RANGE = 7

ACCEPTED_EXTENSIONS = (".csv", ".json")

OUTPUT_FORMATS = ("table", "json", "jsonl", "csv")

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
