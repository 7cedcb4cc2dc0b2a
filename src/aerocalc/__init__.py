"""WGS84 geodetic conversions and the US Standard Atmosphere 1976."""

from aerocalc.geodesy import WGS84, Ellipsoid, GeodeticDomainError, geo2wgs, wgs2geo
from aerocalc.standard_atmosphere import (
    StandardAtmosphere,
    atmosphere_profile,
    evaluate_atmosphere,
)
from aerocalc.types import AtmosphereState, CartesianCoordinate, GeodeticCoordinate

__version__ = '0.1.0'

__all__ = [
    'WGS84',
    'AtmosphereState',
    'CartesianCoordinate',
    'Ellipsoid',
    'GeodeticCoordinate',
    'GeodeticDomainError',
    'StandardAtmosphere',
    'atmosphere_profile',
    'evaluate_atmosphere',
    'geo2wgs',
    'wgs2geo',
]
