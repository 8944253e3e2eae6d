"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    EXIT_WARNINGS = 3
    PROCESSING_ERROR = 4


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    DEFAULT_ENCODING = "UTF-8"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for remote resource fetches
    DATA_URI_SIZE_LIMIT = 32 * 1024  # Larger files keep their url() reference

    CLASSPATH_PREFIX = "classpath:"
    CSS_EXTENSIONS = (".css",)
    JS_EXTENSIONS = (".js", ".mjs")

    ENV_LOG_LEVEL = "ASSETMERGE_LOG_LEVEL"
    ENV_ENCODING = "ASSETMERGE_ENCODING"
    CONFIG_EXTENSIONS = (".yml", ".yaml", ".json")
