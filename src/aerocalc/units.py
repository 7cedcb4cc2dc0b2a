"""Unit conversion factors and display units for atmosphere and geodesy
results.

All model code works in SI units. The helpers here convert SI values into
the units offered for display by the command-line tools."""

import math

from aerocalc.utils.models import CIStrEnum

FEET_TO_METERS = 0.3048
"""Unit conversion factor for feet to meters."""

METERS_TO_FEET = 1.0 / FEET_TO_METERS
"""Unit conversion factor for meters to feet."""

ZERO_CELSIUS_IN_KELVIN = 273.15
"""Offset between the Kelvin and Celsius scales."""

ZERO_FAHRENHEIT_IN_RANKINE = 459.67
"""Offset between the Rankine and Fahrenheit scales."""

PA_TO_HPA = 0.01
"""Unit conversion factor for pascals to hectopascals."""

PA_TO_INHG = 0.000295333727
"""Unit conversion factor for pascals to inches of mercury."""

PA_TO_PSI = 0.000145037738
"""Unit conversion factor for pascals to pounds per square inch."""

MPS_TO_FPS = 3.2808399
"""Unit conversion factor for m/s to ft/s."""

MPS_TO_KMH = 3.6
"""Unit conversion factor for m/s to km/h."""

MPS_TO_KNOTS = 1.943844491
"""Unit conversion factor for m/s to knots."""


def k2c(temperature: float) -> float:
    """Convert a temperature from Kelvin to degrees Celsius."""
    return temperature - ZERO_CELSIUS_IN_KELVIN


def k2f(temperature: float) -> float:
    """Convert a temperature from Kelvin to degrees Fahrenheit."""
    return 9.0 * (temperature - ZERO_CELSIUS_IN_KELVIN) / 5.0 + 32.0


def k2r(temperature: float) -> float:
    """Convert a temperature from Kelvin to degrees Rankine."""
    return k2f(temperature) + ZERO_FAHRENHEIT_IN_RANKINE


def deg2rad(angle: float) -> float:
    return angle * math.pi / 180.0


def rad2deg(angle: float) -> float:
    return angle * 180.0 / math.pi


class AltitudeUnit(CIStrEnum):
    """Units accepted for altitude input."""

    METERS = 'm'
    FEET = 'ft'

    def to_meters(self, value: float) -> float:
        return value * FEET_TO_METERS if self is AltitudeUnit.FEET else value


class TemperatureUnit(CIStrEnum):
    """Units offered for temperature output."""

    KELVIN = 'k'
    CELSIUS = 'c'
    FAHRENHEIT = 'f'
    RANKINE = 'r'

    @property
    def symbol(self) -> str:
        match self:
            case TemperatureUnit.KELVIN:
                return 'K'
            case TemperatureUnit.CELSIUS:
                return '°C'
            case TemperatureUnit.FAHRENHEIT:
                return '°F'
            case TemperatureUnit.RANKINE:
                return '°R'

    def from_kelvin(self, temperature: float) -> float:
        match self:
            case TemperatureUnit.KELVIN:
                return temperature
            case TemperatureUnit.CELSIUS:
                return k2c(temperature)
            case TemperatureUnit.FAHRENHEIT:
                return k2f(temperature)
            case TemperatureUnit.RANKINE:
                return k2r(temperature)


class PressureUnit(CIStrEnum):
    """Units offered for pressure output."""

    PASCAL = 'pa'
    HECTOPASCAL = 'hpa'
    INCHES_OF_MERCURY = 'inhg'
    PSI = 'psi'

    @property
    def factor(self) -> float:
        """Multiplier from pascals to this unit."""
        match self:
            case PressureUnit.PASCAL:
                return 1.0
            case PressureUnit.HECTOPASCAL:
                return PA_TO_HPA
            case PressureUnit.INCHES_OF_MERCURY:
                return PA_TO_INHG
            case PressureUnit.PSI:
                return PA_TO_PSI

    @property
    def precision(self) -> int:
        """Number of decimal places used when displaying values."""
        match self:
            case PressureUnit.PASCAL:
                return 1
            case PressureUnit.HECTOPASCAL:
                return 3
            case PressureUnit.INCHES_OF_MERCURY | PressureUnit.PSI:
                return 5

    @property
    def symbol(self) -> str:
        return {'pa': 'Pa', 'hpa': 'hPa', 'inhg': 'inHg', 'psi': 'psi'}[self.value]

    def from_pascals(self, pressure: float) -> float:
        return self.factor * pressure


class SpeedUnit(CIStrEnum):
    """Units offered for speed of sound output."""

    METERS_PER_SECOND = 'mps'
    FEET_PER_SECOND = 'fps'
    KILOMETERS_PER_HOUR = 'kmh'
    KNOTS = 'kts'

    @property
    def factor(self) -> float:
        """Multiplier from m/s to this unit."""
        match self:
            case SpeedUnit.METERS_PER_SECOND:
                return 1.0
            case SpeedUnit.FEET_PER_SECOND:
                return MPS_TO_FPS
            case SpeedUnit.KILOMETERS_PER_HOUR:
                return MPS_TO_KMH
            case SpeedUnit.KNOTS:
                return MPS_TO_KNOTS

    @property
    def precision(self) -> int:
        """Number of decimal places used when displaying values."""
        match self:
            case SpeedUnit.METERS_PER_SECOND | SpeedUnit.KNOTS:
                return 2
            case SpeedUnit.FEET_PER_SECOND | SpeedUnit.KILOMETERS_PER_HOUR:
                return 1

    @property
    def symbol(self) -> str:
        return {'mps': 'm/s', 'fps': 'ft/s', 'kmh': 'km/h', 'kts': 'kts'}[self.value]

    def from_mps(self, speed: float) -> float:
        return self.factor * speed
