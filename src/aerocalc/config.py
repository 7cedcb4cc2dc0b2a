# TODO: Remove this when we migrate to Python 3.14.
from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import ConfigDict, Field, model_validator

from aerocalc.geodesy import Ellipsoid
from aerocalc.units import AltitudeUnit, PressureUnit, SpeedUnit, TemperatureUnit
from aerocalc.utils.helpers import deep_update
from aerocalc.utils.models import CIBaseModel

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'AEROCALC_CONFIG'
"""Environment variable naming a configuration file to load by default."""


class EllipsoidConfig(CIBaseModel):
    """Reference ellipsoid used by the geodetic conversion tools."""

    model_config = ConfigDict(frozen=True)
    """Configuration is frozen after creation."""

    equatorial_radius: float = Field(gt=0.0)
    """Equatorial radius in meters."""

    inverse_flattening: float = Field(gt=1.0)
    """Inverse flattening (1/f)."""

    @property
    def ellipsoid(self) -> Ellipsoid:
        return Ellipsoid.from_inverse_flattening(
            self.equatorial_radius, self.inverse_flattening
        )


class DisplayConfig(CIBaseModel):
    """Default units and precisions for command-line output."""

    model_config = ConfigDict(frozen=True)
    """Configuration is frozen after creation."""

    altitude_unit: AltitudeUnit = AltitudeUnit.METERS
    """Unit of altitudes given to the atmosphere tools."""

    temperature_unit: TemperatureUnit = TemperatureUnit.KELVIN
    pressure_unit: PressureUnit = PressureUnit.PASCAL
    speed_unit: SpeedUnit = SpeedUnit.METERS_PER_SECOND

    angle_precision: int = Field(default=9, ge=0)
    """Decimal places for angles in degrees."""

    length_precision: int = Field(default=4, ge=0)
    """Decimal places for lengths in meters."""


class Config(CIBaseModel):
    """Global aerocalc configuration settings.

    This is a singleton class; only one instance can be created. Create it at
    the start of the program with `Config.load`, then access it anywhere as
    `aerocalc.config.config` via the module-level proxy.

    The numerical models themselves never read the configuration: they take
    everything they need as arguments. Only the command-line tools use it."""

    model_config = ConfigDict(frozen=True)
    """Configuration is frozen after creation."""

    ellipsoid: EllipsoidConfig
    """Reference ellipsoid settings."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    """Output formatting settings."""

    @model_validator(mode='after')
    def register_singleton(self):
        """Initialize the global configuration singleton."""

        global _config
        if _config is not None:
            raise RuntimeError('Config has already been initialized.')
        _config = self
        return self

    @classmethod
    def get(cls) -> Config:
        """Get the global configuration singleton.

        Raises an error if the configuration has not yet been initialized."""
        global _config
        if _config is None:
            raise ValueError('aerocalc configuration is not set')
        return _config

    @classmethod
    def load(cls, config_file: str | Path | None = None, **kwargs) -> Config:
        """Load configuration from TOML files.

        The `default_config.toml` file included with aerocalc is loaded first,
        then TOML data from `config_file` (or from the file named by the
        AEROCALC_CONFIG environment variable) is overlaid on top. Keyword
        arguments are finally applied on top of the result, so only options
        that differ from the defaults need to be given."""

        with open(Path(__file__).parent / 'data/default_config.toml', 'rb') as fp:
            default_data = tomllib.load(fp)

        if config_file is None:
            config_file = os.environ.get(CONFIG_ENV_VAR) or None

        overlay_data = {}
        if config_file is not None:
            config_file = Path(config_file)
            if not config_file.exists():
                raise FileNotFoundError(f'Configuration file {config_file} not found.')
            logger.debug('Loading configuration from %s', config_file)
            with open(config_file, 'rb') as fp:
                overlay_data = tomllib.load(fp)

        overlay_data = deep_update(overlay_data, kwargs)

        return cls.model_validate(deep_update(default_data, overlay_data))

    @staticmethod
    def reset():
        """Reset the global configuration singleton.

        Mostly intended for tests, and for command-line entry points that
        load their own configuration."""
        global _config
        _config = None


# Module property-like access to configuration via a proxy to allow late
# initialization.

_config: Config | None = None


class ConfigProxy:
    def __getattr__(self, name):
        global _config
        if _config is None:
            raise ValueError('aerocalc configuration is not set')
        return getattr(_config, name)

    def __setattr__(self, name, value):
        raise AttributeError('aerocalc configuration is read-only')


config = ConfigProxy()
