import json
import os
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"

# Overrides the config file path, e.g. in containers.
CONFIG_ENV = "PHOTOKEYS_CONFIG"


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/audit.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


class ApiConfig:
    """Limits of the id and title endpoints. Storage format constants live in rnd."""

    __slots__ = ("token_size", "max_batch", "username", "password")

    def __init__(self, token_size=10, max_batch=100, username="admin", password="admin123"):
        self.token_size = token_size
        self.max_batch = max_batch
        self.username = os.environ.get("API_USERNAME", username)
        self.password = os.environ.get("API_PASSWORD", password)


class Config:
    __slots__ = ("server", "logging", "api")

    def __init__(self, server=None, logging=None, api=None):
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()
        self.api = api or ApiConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
            ApiConfig(**d.get("api", {})),
        )


def load_config(path=None):
    config_path = Path(path or os.environ.get(CONFIG_ENV) or _DEFAULT_CONFIG)

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
