"""Configuration management."""


class Config:
    """Configuration management."""

    # Record encoding
    FIELD_SEPARATOR = '|'  # Separates tag, key and value within a record
    RECORD_DELIMITER = '\n'  # One record per line
    LOG_ENCODING = 'utf-8'

    # Storage settings
    LOG_FILENAME = 'logFile.txt'  # Default log path, used by the CLI only
    FSYNC_ON_APPEND = True  # fsync after every append
