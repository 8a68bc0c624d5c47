"""
Application-wide constants for apiwire.
"""

# Network
DEFAULT_TIMEOUT_SECONDS = 30
MAX_TIMEOUT_SECONDS = 300
DEFAULT_MAX_WORKERS = 4
MAX_WORKERS = 64
DEFAULT_PROBE_PORT = 443
DEFAULT_PROBE_TIMEOUT_SECONDS = 5.0

# Bulletins
REACHABLE_BULLETIN_DURATION_SECONDS = 4.0
MAXIMUM_BULLETIN_PRIORITY = 1000

# Logging
DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024
MIN_LOG_FILE_SIZE_BYTES = 1024
DEFAULT_LOG_BACKUP_COUNT = 5

# Debug output
MASKED_VALUE = "[REDACTED]"
MAX_DEBUG_BODY_CHARS = 2048
