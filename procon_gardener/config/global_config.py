"""Global configuration management (~/.procon-gardener/config.json)."""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

from ..errors import ConfigError


logger = logging.getLogger(__name__)

APP_NAME = "procon-gardener"


def config_dir() -> Path:
    return Path.home() / f".{APP_NAME}"


def config_path() -> Path:
    return config_dir() / "config.json"


@dataclass
class ServiceConfig:
    """Settings for one judge service."""

    repository_path: str = ""
    user_id: str = ""
    user_email: str = ""

    @property
    def repository(self) -> Path:
        """Archive root with ``~`` expanded."""
        return Path(self.repository_path).expanduser()

    def validate(self, path: Optional[Path] = None) -> None:
        """Ensure the settings needed for archiving are filled in."""
        missing = [name for name in ("repository_path", "user_id") if not getattr(self, name)]
        if missing:
            raise ConfigError(
                f"Config is missing {', '.join(missing)}; run 'procon-gardener edit'",
                path or config_path(),
            )


@dataclass
class GlobalConfig:
    """
    Global configuration, one entry per judge service.
    Stored at ~/.procon-gardener/config.json
    """

    atcoder: ServiceConfig = field(default_factory=ServiceConfig)

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "GlobalConfig":
        """Load global config from file."""
        if path is None:
            path = config_path()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigError("Config file not found; run 'procon-gardener init'", path) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"Config file is not valid JSON: {e}", path) from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file: {e}", path) from e

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a JSON object", path)
        service = data.get("atcoder", {})
        if not isinstance(service, dict):
            raise ConfigError("'atcoder' entry must be a JSON object", path)

        values = {}
        for name in ("repository_path", "user_id", "user_email"):
            value = service.get(name, "")
            if not isinstance(value, str):
                raise ConfigError(f"'atcoder.{name}' must be a string, got {value!r}", path)
            values[name] = value

        return cls(atcoder=ServiceConfig(**values))

    def save(self, path: Optional[Path] = None) -> None:
        """Save global config to file."""
        if path is None:
            path = config_path()

        with open(path, "w", encoding="utf-8") as f:
            json.dump(asdict(self), f, indent="\t")


def init_config(force: bool = False, path: Optional[Path] = None) -> Path:
    """
    Create a config file with empty settings.
    An existing file is only overwritten when ``force`` is set.
    """
    if path is None:
        path = config_path()

    logger.info("Initialize your config...")
    try:
        path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)
        if force or not path.exists():
            GlobalConfig().save(path)
    except OSError as e:
        raise ConfigError(f"Cannot write config file: {e}", path) from e

    logger.info("Initialized your config at %s", path)
    return path
