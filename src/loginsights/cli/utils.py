import logging

_LOGGER = logging.getLogger("loginsights.cli")


def error_exit(message: str, code: int = 2) -> None:
    _LOGGER.error(message)
    raise SystemExit(code)
