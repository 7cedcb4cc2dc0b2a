from typing import Any, NamedTuple


class GeodeticCoordinate(NamedTuple):
    """A position given by geodetic latitude, longitude and altitude above
    the reference ellipsoid. Fields may be floats or NumPy arrays of equal
    shape."""

    latitude: Any
    """Geodetic latitude in radians, in [-pi/2, pi/2]."""

    longitude: Any
    """Longitude in radians, in (-pi, pi]."""

    altitude: Any
    """Height above the ellipsoid in meters."""


class CartesianCoordinate(NamedTuple):
    """An Earth-Centered-Earth-Fixed position in meters."""

    x: Any
    y: Any
    z: Any
