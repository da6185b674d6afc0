from enum import Enum

# Number of remote hops a health query may travel before it stops fanning out.
DEFAULT_MAX_DEPTH = 8

HEALTH_DEPTH_HEADER = "X-Health-Depth"


class EnumEnvironment(str, Enum):
    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class EnumLogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class EnumLogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"
