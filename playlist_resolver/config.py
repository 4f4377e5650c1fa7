import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional, Union

import yaml
from pymonad.either import Either, Left, Right

from playlist_resolver.domain.errors import ConfigError
from playlist_resolver.i18n import get_default_lang

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "PLAYLIST_RESOLVER_CONFIG"

# Environment variable -> Settings field
ENV_OVERRIDES = {
    "PLAYLIST_RESOLVER_TIMEOUT": "timeout",
    "RADIO_BROWSER_URL": "radio_browser_url",
    "PLAYLIST_RESOLVER_LOG_LEVEL": "log_level",
}


@dataclass(frozen=True)
class Settings:
    """Runtime settings of the resolver and the station directory."""
    timeout: float = 30.0
    radio_browser_url: str = "https://de1.api.radio-browser.info"
    station_limit: int = 100
    log_level: str = "WARNING"
    lang: str = "en"


def _as_int(value) -> int:
    """Like int(), but refuses booleans and values with a fractional part."""
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected an integer, got {value!r}")
    return int(value)


def _coerce(settings: Settings) -> Settings:
    """Casts raw YAML/env values to the field types and validates them."""
    try:
        coerced = replace(
            settings,
            timeout=float(settings.timeout),
            station_limit=_as_int(settings.station_limit),
            log_level=str(settings.log_level).upper(),
            radio_browser_url=str(settings.radio_browser_url),
            lang=str(settings.lang),
        )
    except (TypeError, ValueError) as e:
        raise ValueError(f"Invalid setting value: {e}")

    if coerced.timeout <= 0:
        raise ValueError("'timeout' must be greater than zero.")
    if coerced.station_limit <= 0:
        raise ValueError("'station_limit' must be greater than zero.")
    if not isinstance(logging.getLevelName(coerced.log_level), int):
        raise ValueError(f"'log_level' must be a logging level name, got '{coerced.log_level}'.")
    return coerced


def load_settings(path: Optional[Union[str, Path]] = None) -> Either[ConfigError, Settings]:
    """
    Builds the settings from defaults, an optional YAML file and environment
    overrides, in that order.

    Args:
        path: YAML file to read. Falls back to $PLAYLIST_RESOLVER_CONFIG.

    Returns:
        Either: A Right(Settings) or a Left(ConfigError).
    """
    settings = Settings(lang=get_default_lang())
    path = path or os.environ.get(CONFIG_ENV_VAR)

    if path:
        logger.info(f"Loading configuration from '{path}'.")
        try:
            with open(path, "r", encoding="utf-8") as file:
                data = yaml.safe_load(file) or {}
        except (yaml.YAMLError, IOError) as e:
            logger.error(f"Could not read configuration file '{path}': {e}")
            return Left(ConfigError(f"Could not read configuration file '{path}': {e}"))

        if not isinstance(data, dict):
            return Left(ConfigError(f"Configuration file '{path}' must contain a mapping."))

        known = {f.name for f in fields(Settings)}
        for key in data:
            if key not in known:
                logger.warning(f"Ignoring unknown configuration key '{key}'.")
        settings = replace(settings, **{k: v for k, v in data.items() if k in known})

    overrides = {
        field: os.environ[env_var]
        for env_var, field in ENV_OVERRIDES.items()
        if os.environ.get(env_var)
    }
    if overrides:
        logger.debug(f"Environment overrides: {sorted(overrides)}")
        settings = replace(settings, **overrides)

    try:
        return Right(_coerce(settings))
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return Left(ConfigError(str(e)))
