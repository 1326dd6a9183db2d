"""
System Configuration Constants

Application metadata, file locations and logging defaults.
"""


class Application:
    """Application metadata constants."""

    NAME = "Anidle"
    VERSION = "0.1.0"


class FileSystem:
    """File system constants."""

    HOME_DIR = ".anidle"
    CONFIG_FILE = "anidle.toml"
    CATALOG_PACKAGE = "anidle.catalog.data"
    SAMPLE_CATALOG = "sample_catalog.json"


class Logging:
    """Logging defaults."""

    DEFAULT_LEVEL = "WARNING"
    DEFAULT_LOGGER_NAME = "anidle"
    TIME_FORMAT = "[%H:%M:%S]"
