import os
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import toml
from dotenv import load_dotenv

from ordinals.constants import CONFIG_FILE, DEFAULT_DATE_FORMAT, DEFAULT_TZ_NAME


class ConfigError(Exception):
    """custom exception for unusable settings"""
    def __init__(self, message: str = 'invalid ordinals settings') -> None:
        """initializes the error"""
        self.message = message
        super().__init__(self.message)


@dataclass
class Settings:
    """
    settings for date output

    attributes:
        timezone: timezone used for `--today`
        date_format: strftime format, `{day}` becomes the ordinal day of the month
        loaded_from: the settings file that was read, if any
    """
    timezone: ZoneInfo = field(default_factory=lambda: ZoneInfo(DEFAULT_TZ_NAME))
    date_format: str = DEFAULT_DATE_FORMAT
    loaded_from: Path | None = None


def _zone(name: object, source: str) -> ZoneInfo:
    if not isinstance(name, str) or not name.strip():
        msg = f'timezone from {source} must be a non-empty string, got {name!r}'
        raise ConfigError(msg)
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as e:
        msg = f'unknown timezone {name!r} from {source}'
        raise ConfigError(msg) from e


def _read_toml(path: Path) -> dict:
    try:
        with path.open(encoding='utf-8') as f:
            return toml.load(f)
    except toml.TomlDecodeError as e:
        msg = f'`{path}` is not valid toml: {e}'
        raise ConfigError(msg) from e


def load_settings(path: Path | None = None) -> Settings:
    """
    loads settings from a toml file and the environment (a `.env` file is loaded first)

    lookup order for the file: `path`, then `ORDINALS_CONFIG`, then `ordinals.toml` in the working directory.
    `ORDINALS_TZ` and `ORDINALS_DATE_FORMAT` override the file.

    args:
        path: optional path to the settings file

    raises:
        ConfigError: for malformed toml, non-string values or unknown timezones

    returns:
        the loaded `Settings`, defaults where nothing is set
    """
    load_dotenv()

    env_path = os.environ.get('ORDINALS_CONFIG') or None
    explicit = path is not None or env_path is not None
    config_path = Path(path or env_path or CONFIG_FILE).expanduser()

    settings = Settings()
    if config_path.is_file():
        date_section = _read_toml(config_path).get('date', {})
        if not isinstance(date_section, dict):
            msg = f'`[date]` in `{config_path}` must be a table'
            raise ConfigError(msg)
        if 'timezone' in date_section:
            settings.timezone = _zone(date_section['timezone'], str(config_path))
        if 'format' in date_section:
            fmt = date_section['format']
            if not isinstance(fmt, str):
                msg = f'date format in `{config_path}` must be a string, got {fmt!r}'
                raise ConfigError(msg)
            settings.date_format = fmt
        settings.loaded_from = config_path
    elif explicit:
        warnings.warn(f'`{config_path}` does not exist, using default settings', UserWarning, stacklevel=2)

    if tz_name := os.environ.get('ORDINALS_TZ'):
        settings.timezone = _zone(tz_name, 'ORDINALS_TZ')
    if fmt := os.environ.get('ORDINALS_DATE_FORMAT'):
        settings.date_format = fmt

    return settings
