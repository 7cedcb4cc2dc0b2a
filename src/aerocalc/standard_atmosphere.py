"""US Standard Atmosphere 1976, NASA/NOAA, TM-X-74335.

Temperature, pressure, density, speed of sound and viscosity as functions of
geometric altitude, for altitudes up to 84852 m. Page and table references
below are to the 1976 report."""

import logging
import math
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np
import pandas as pd

from aerocalc.constants import S, T0, R_star, beta_visc, g0, gamma
from aerocalc.types import AtmosphereState

logger = logging.getLogger(__name__)


class Constituent(NamedTuple):
    """A gas in the sea-level dry air mixture."""

    name: str
    molecular_weight: float
    """Molecular weight [kg/kmol]."""

    fractional_volume: float
    """Fractional volume [-]."""


# Table 3, p.3
GAS_MIXTURE: tuple[Constituent, ...] = (
    Constituent('N2', 28.0134, 0.78084),
    Constituent('O2', 31.9988, 0.209476),
    Constituent('Ar', 39.948, 0.00934),
    Constituent('CO2', 44.00995, 0.000314),
    Constituent('Ne', 20.183, 0.00001818),
    Constituent('He', 4.0026, 0.00000524),
    Constituent('Kr', 83.8, 0.00000114),
    Constituent('Xe', 131.3, 0.000000087),
    Constituent('CH4', 16.04303, 0.000002),
    Constituent('H2', 2.01594, 0.0000005),
)

# Layer boundary altitudes [m] (Table 4, p.3).
H_B: tuple[float, ...] = (
    11000.0,
    20000.0,
    32000.0,
    47000.0,
    51000.0,
    71000.0,
    84852.0,
)

# Pressure at the base of each layer [Pa] (Table I, p.50-73). Entry i is the
# base pressure of the layer starting at H_B[i - 1], with sea level first.
P_B: tuple[float, ...] = (
    101325.0,
    22632.0,
    5474.8,
    868.01,
    110.9,
    66.938,
    3.9564,
)

# Temperature at the base of each layer [K] (Table I, p.50-73), indexed as
# P_B.
T_B: tuple[float, ...] = (
    288.15,
    216.65,
    216.65,
    228.65,
    270.65,
    270.65,
    214.65,
)

# Temperature gradient of each layer [K/m] (Table 4, p.3), indexed as P_B.
L_B: tuple[float, ...] = (
    -6.5e-3,
    0.0,
    1.0e-3,
    2.8e-3,
    0.0,
    -2.8e-3,
    -2.0e-3,
)

# Gradients smaller than this are treated as isothermal layers.
ISOTHERMAL_GRADIENT_TOLERANCE = 1.0e-6


def mean_molecular_weight(mixture: Iterable[Constituent] = GAS_MIXTURE) -> float:
    """Fractional-volume weighted mean molecular weight of a gas mixture
    [kg/kmol]."""
    mixture = tuple(mixture)
    total_weight = sum(c.molecular_weight * c.fractional_volume for c in mixture)
    total_volume = sum(c.fractional_volume for c in mixture)
    return total_weight / total_volume


class LayerBase(NamedTuple):
    """Base values of the atmospheric layer containing an altitude."""

    altitude: float
    pressure: float
    temperature: float
    gradient: float


def find_layer(altitude: float) -> LayerBase | None:
    """Look up the base values of the layer containing `altitude`.

    Layer boundaries belong to the layer above them. Returns `None` above
    the top of the model, and for NaN."""
    if not altitude <= H_B[6]:
        return None

    if altitude < H_B[0]:
        return LayerBase(0.0, P_B[0], T0, -(T0 - T_B[1]) / H_B[0])

    for i in range(1, 7):
        if altitude < H_B[i]:
            return LayerBase(H_B[i - 1], P_B[i], T_B[i], L_B[i])

    # Only the top boundary itself gets here.
    return LayerBase(H_B[5], P_B[6], T_B[6], 0.0)


class StandardAtmosphere:
    """US Standard Atmosphere 1976 model.

    The mean molecular weight of air is computed from the gas mixture when
    the model is created and is constant afterwards, so a single instance
    can be shared freely between threads."""

    def __init__(self, mixture: Iterable[Constituent] = GAS_MIXTURE):
        self._m = mean_molecular_weight(mixture)

    @property
    def m(self) -> float:
        """Mean molecular weight [kg/kmol]."""
        return self._m

    def evaluate(self, altitude: float) -> AtmosphereState:
        """Atmospheric properties at a geometric altitude in meters.

        Altitudes above 84852 m give a state with `valid` set to false."""
        layer = find_layer(altitude)
        if layer is None:
            logger.debug('Altitude %s m is above the standard atmosphere', altitude)
            return AtmosphereState.invalid()

        m = self._m
        delta_h = altitude - layer.altitude

        # p.10
        temperature = layer.temperature + layer.gradient * delta_h

        # p.12
        if abs(layer.gradient) < ISOTHERMAL_GRADIENT_TOLERANCE:
            pressure = layer.pressure * math.exp(
                -(g0 * m * delta_h) / (R_star * layer.temperature)
            )
        else:
            pressure = layer.pressure * math.pow(
                layer.temperature / temperature, (g0 * m) / (R_star * layer.gradient)
            )

        density = self.air_density(pressure, temperature)
        dynamic_viscosity = self.dynamic_viscosity(temperature)

        return AtmosphereState(
            temperature=temperature,
            pressure=pressure,
            density=density,
            speed_of_sound=self.speed_of_sound(temperature),
            dynamic_viscosity=dynamic_viscosity,
            kinematic_viscosity=dynamic_viscosity / density,
            valid=True,
        )

    def air_density(self, pressure: float, temperature: float) -> float:
        """Air density [kg/m^3] from pressure [Pa] and temperature [K] (p.15)."""
        return (pressure * self._m) / (R_star * temperature)

    def speed_of_sound(self, temperature: float) -> float:
        """Speed of sound [m/s] at a temperature [K] (p.18)."""
        return math.sqrt((gamma * R_star * temperature) / self._m)

    @staticmethod
    def dynamic_viscosity(temperature: float) -> float:
        """Dynamic viscosity [Pa*s] by Sutherland's formula (p.19)."""
        return beta_visc * math.pow(temperature, 3.0 / 2.0) / (temperature + S)

    def sea_level(self) -> AtmosphereState:
        """Atmospheric properties at zero altitude."""
        return self.evaluate(0.0)

    def profile(self, altitudes: Iterable[float]) -> pd.DataFrame:
        """Evaluate the model at each of a sequence of altitudes.

        Parameters
        ----------
        altitudes : Iterable[float]
            Geometric altitudes in meters.

        Returns
        -------
        pd.DataFrame
            One row per altitude, indexed by altitude, with one column per
            `AtmosphereState` field. Rows outside the model have `valid`
            false and zero values.
        """
        altitudes = np.asarray(list(altitudes), dtype=float)
        rows = [self.evaluate(float(h)).as_dict() for h in altitudes]
        df = pd.DataFrame(rows, columns=AtmosphereState.field_names())
        df.index = pd.Index(altitudes, name='altitude')
        return df


STANDARD_ATMOSPHERE = StandardAtmosphere()
"""Shared model instance built from the standard gas mixture."""


def evaluate_atmosphere(altitude: float) -> AtmosphereState:
    """Atmospheric properties at a geometric altitude in meters."""
    return STANDARD_ATMOSPHERE.evaluate(altitude)


def atmosphere_profile(altitudes: Iterable[float]) -> pd.DataFrame:
    """Atmospheric properties over a sequence of altitudes in meters."""
    return STANDARD_ATMOSPHERE.profile(altitudes)


def sea_level_state() -> AtmosphereState:
    """Standard sea-level atmosphere (288.15 K, 101325 Pa, 1.225 kg/m^3)."""
    return STANDARD_ATMOSPHERE.sea_level()

