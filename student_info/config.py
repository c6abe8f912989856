# config.py
import logging
import os

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "STUDENT_INFO_CONFIG"
DEFAULT_CONFIG_FILE = "service.properties"

DEFAULTS = {
    "DB_HOST": "localhost",
    "DB_PORT": "3306",
    "DB_USER": "root",
    "DB_PASS": "",
    "DB_NAME": "student_info",
    "COLLEGE_SERVICE_URL": "http://localhost:9001",
    "COLLEGE_TIMEOUT": "5",
    "SERVER_HOST": "0.0.0.0",
    "SERVER_PORT": "9002",
    "COLLEGE_SERVER_PORT": "9001",
    "LOG_LEVEL": "INFO",
}


class ConfigError(Exception):
    pass


# ---------------------------------------------------
# Load config from external properties file
# ---------------------------------------------------
def load_properties(filename):
    cfg = {}
    with open(filename) as f:
        for lineno, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                raise ConfigError(f"{filename}:{lineno}: expected key=value, got {line!r}")
            key, value = line.split("=", 1)
            cfg[key.strip()] = value.strip()
    return cfg


def load_config(filename=None):
    """Return DEFAULTS overlaid with the properties file, if there is one.

    The file is taken from ``filename``, then ``$STUDENT_INFO_CONFIG``,
    then ``service.properties`` in the working directory.
    """
    filename = filename or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE
    cfg = dict(DEFAULTS)
    if os.path.exists(filename):
        cfg.update(load_properties(filename))
    else:
        logger.info("No config file at %s, using defaults", filename)
    return cfg


def db_config(cfg):
    """Keyword arguments for ``mysql.connector.connect``."""
    return {
        "host": cfg["DB_HOST"],
        "port": int(cfg["DB_PORT"]),
        "user": cfg["DB_USER"],
        "password": cfg["DB_PASS"],
        "database": cfg["DB_NAME"],
    }
