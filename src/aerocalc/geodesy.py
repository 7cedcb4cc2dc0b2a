# TODO: Remove this when we migrate to Python 3.14+.
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from aerocalc.constants import WGS84_A, WGS84_INVERSE_FLATTENING
from aerocalc.types import CartesianCoordinate, GeodeticCoordinate

if TYPE_CHECKING:
    from aerocalc.types import FloatOrNDArray

logger = logging.getLogger(__name__)


class GeodeticDomainError(ValueError):
    """Raised in strict mode when an ECEF position cannot be converted to
    geodetic coordinates (for example the center of the Earth)."""


@dataclass(frozen=True)
class Ellipsoid:
    """Reference ellipsoid defined by its equatorial radius and flattening.

    The remaining parameters are derived once on construction.

    References
    ----------
    Department of Defense World Geodetic System 1984, NIMA TR-8350.2, 2000.
    """

    a: float
    """Equatorial radius [m]."""

    f: float
    """Flattening [-]."""

    b: float = field(init=False)
    """Polar radius [m]."""

    a2: float = field(init=False, repr=False)
    """Equatorial radius squared [m^2]."""

    b2: float = field(init=False, repr=False)
    """Polar radius squared [m^2]."""

    e2: float = field(init=False, repr=False)
    """First eccentricity squared [-]."""

    ep2: float = field(init=False, repr=False)
    """Second eccentricity squared [-]."""

    def __post_init__(self):
        if not self.a > 0.0:
            raise ValueError('Equatorial radius must be positive.')
        if not 0.0 <= self.f < 1.0:
            raise ValueError('Flattening must be in [0, 1).')

        # The instance is frozen, so derived values are set directly.
        b = self.a * (1.0 - self.f)
        a2 = self.a * self.a
        b2 = b * b
        object.__setattr__(self, 'b', b)
        object.__setattr__(self, 'a2', a2)
        object.__setattr__(self, 'b2', b2)
        object.__setattr__(self, 'e2', self.f * (2.0 - self.f))
        object.__setattr__(self, 'ep2', (a2 - b2) / b2)

    @classmethod
    def from_inverse_flattening(
        cls, equatorial_radius: float, inverse_flattening: float
    ) -> Ellipsoid:
        return cls(a=equatorial_radius, f=1.0 / inverse_flattening)


WGS84 = Ellipsoid.from_inverse_flattening(WGS84_A, WGS84_INVERSE_FLATTENING)
"""The WGS84 reference ellipsoid."""


def geo2wgs(
    lat: FloatOrNDArray,
    lon: FloatOrNDArray,
    alt: FloatOrNDArray,
    ellipsoid: Ellipsoid = WGS84,
) -> CartesianCoordinate:
    """Convert geodetic coordinates to ECEF Cartesian coordinates.

    Parameters
    ----------
    lat : Union[float, NDArray]
        Geodetic latitude in radians.
    lon : Union[float, NDArray]
        Longitude in radians.
    alt : Union[float, NDArray]
        Height above the ellipsoid in meters.
    ellipsoid : Ellipsoid
        Reference ellipsoid, WGS84 by default.

    Returns
    -------
    CartesianCoordinate
        ECEF x, y and z in meters.
    """
    sin_lat = np.sin(lat)
    cos_lat = np.cos(lat)
    sin_lon = np.sin(lon)
    cos_lon = np.cos(lon)

    # Prime vertical radius of curvature.
    n = ellipsoid.a / np.sqrt(1.0 - ellipsoid.e2 * sin_lat * sin_lat)

    x = (n + alt) * cos_lat * cos_lon
    y = (n + alt) * cos_lat * sin_lon
    z = (n * (ellipsoid.b2 / ellipsoid.a2) + alt) * sin_lat

    return CartesianCoordinate(x, y, z)


def wgs2geo(
    x: FloatOrNDArray,
    y: FloatOrNDArray,
    z: FloatOrNDArray,
    ellipsoid: Ellipsoid = WGS84,
    strict: bool = False,
) -> GeodeticCoordinate:
    """Convert ECEF Cartesian coordinates to geodetic coordinates.

    Uses Zhu's closed-form solution, without iterative refinement. The formula
    is not guarded on the polar axis: the origin always produces non-finite
    results, and other points on the axis may, depending on their height.

    Parameters
    ----------
    x, y, z : Union[float, NDArray]
        ECEF coordinates in meters.
    ellipsoid : Ellipsoid
        Reference ellipsoid, WGS84 by default.
    strict : bool
        Raise instead of returning non-finite values.

    Returns
    -------
    GeodeticCoordinate
        Latitude and longitude in radians and altitude in meters.

    Raises
    ------
    GeodeticDomainError
        If `strict` is set and any result is not finite.

    References
    ----------
    Zhu J.: Conversion of Earth-centered Earth-fixed coordinates to geodetic
    coordinates, IEEE Transactions on Aerospace and Electronic Systems, 1994.
    """
    a = ellipsoid.a
    a2 = ellipsoid.a2
    b2 = ellipsoid.b2
    ecc2 = ellipsoid.e2
    ep2 = ellipsoid.ep2

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        z2 = z * z
        r = np.sqrt(x * x + y * y)
        r2 = r * r
        # Linear eccentricity squared [m^2], not the dimensionless one.
        e2 = a2 - b2
        f = 54.0 * b2 * z2
        g = r2 + (1.0 - ecc2) * z2 - ecc2 * e2
        c = ecc2 * ecc2 * f * r2 / (g * g * g)
        s = np.power(1.0 + c + np.sqrt(c * c + 2.0 * c), 1.0 / 3.0)
        p0 = s + 1.0 / s + 1.0
        p = f / (3.0 * p0 * p0 * g * g)
        q = np.sqrt(1.0 + 2.0 * (ecc2 * ecc2) * p)
        r0 = -(p * ecc2 * r) / (1.0 + q) + np.sqrt(
            0.5 * a2 * (1.0 + 1.0 / q)
            - p * (1.0 - ecc2) * z2 / (q + q * q)
            - 0.5 * p * r2
        )
        uv = r - ecc2 * r0
        u = np.sqrt(uv * uv + z2)
        v = np.sqrt(uv * uv + (1.0 - ecc2) * z2)
        z0 = b2 * z / (a * v)

        alt = u * (1.0 - b2 / (a * v))
        lat = np.arctan((z + ep2 * z0) / r)
        lon = np.arctan2(y, x)

    result = GeodeticCoordinate(lat, lon, alt)
    if not is_finite_position(result):
        logger.debug('Degenerate ECEF input for geodetic conversion: %s', (x, y, z))
        if strict:
            raise GeodeticDomainError(
                'ECEF position is outside the domain of the closed-form '
                'geodetic conversion.'
            )
    return result


def is_finite_position(coord: GeodeticCoordinate | CartesianCoordinate) -> bool:
    """Check that every component of a coordinate is finite."""
    return bool(all(np.all(np.isfinite(c)) for c in coord))
