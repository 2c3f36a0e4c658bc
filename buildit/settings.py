import logging
from configparser import ConfigParser
from pathlib import Path

ini_file_path_posix = Path(__file__).parent / "settings.ini"
ini_file_path = str(ini_file_path_posix.absolute())

parser = ConfigParser()
parser.read(ini_file_path)

LOGGER_TRACE = 5
logging.addLevelName(LOGGER_TRACE, "TRACE")

log_level_mapper = {
    "notset": logging.NOTSET,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "trace": LOGGER_TRACE,
}

log_format_mapper = {
    "$name": "%(name)s",
    "$levelname": "%(levelname)s",
    "$asctime": "%(asctime)s",
    "$message": "%(message)s",
}

LOGGER_NAME = parser.get("Logging", "logger_name")

MAIN_LOGGER_LEVEL = parser.get("Logging", "logger_level")
STREAM_HANDLER_LEVEL = parser.get("Logging", "stream_handler_level")

DEFAULT_SCHEME = parser.get("Builder", "default_scheme")
DEFAULT_METHOD = parser.get("Builder", "default_method").upper()
HEADER_SEPARATOR = parser.get("Builder", "header_separator")
BODY_ENCODING = parser.get("Builder", "body_encoding")

if any(
    (
        (MAIN_LOGGER_LEVEL not in log_level_mapper),
        (STREAM_HANDLER_LEVEL not in log_level_mapper),
    )
):
    raise ValueError(
        "Setting.ini contains invalid value "
        f"for one of the logger levels ({MAIN_LOGGER_LEVEL} or {STREAM_HANDLER_LEVEL})"
    )

if DEFAULT_METHOD not in ("GET", "POST", "PUT", "DELETE"):
    raise ValueError(
        f"Setting.ini contains invalid value for the default method ({DEFAULT_METHOD})"
    )

MAIN_LOGGER_LEVEL = log_level_mapper.get(MAIN_LOGGER_LEVEL)  # type: ignore
STREAM_HANDLER_LEVEL = log_level_mapper.get(STREAM_HANDLER_LEVEL)  # type: ignore

FORMAT = parser.get("Logging", "stream_handler_format")

for key, value in log_format_mapper.items():
    FORMAT = FORMAT.replace(key, value)


def _trace(message, *args, **kwargs):
    self = logging.getLogger(LOGGER_NAME)

    if self.isEnabledFor(LOGGER_TRACE):
        self._log(LOGGER_TRACE, message, args, **kwargs)


main_logger = logging.getLogger(LOGGER_NAME)
main_logger.trace = _trace  # type: ignore
main_logger.propagate = False
main_logger.setLevel(MAIN_LOGGER_LEVEL)

handler = logging.StreamHandler()
handler.setLevel(STREAM_HANDLER_LEVEL)

formatter = logging.Formatter(FORMAT)

handler.setFormatter(formatter)
main_logger.addHandler(handler)
