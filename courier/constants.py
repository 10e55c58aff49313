from typing import ClassVar


class Defaults:
    MAX_AGE_MONTHS = 1
    VERBOSITY = 0
    CONFIG_FILE = "courier.toml"


class FormatVersions:
    V4_0 = "4.0"
    V3_1 = "3.1"
    SUPPORTED: ClassVar[tuple[str, ...]] = (V4_0, V3_1)


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2


class EnvVars:
    FORMATS = "COURIER_FORMATS"
    MAX_AGE_MONTHS = "COURIER_MAX_AGE_MONTHS"
    VERBOSITY = "COURIER_VERBOSITY"
