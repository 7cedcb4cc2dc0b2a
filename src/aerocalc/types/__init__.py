import numpy as np
from numpy.typing import NDArray

from .atmosphere import AtmosphereState
from .spatial import CartesianCoordinate, GeodeticCoordinate

# create a type for Union[float, NDArray]
FloatOrNDArray = float | NDArray[np.float64]

__all__ = [
    'AtmosphereState',
    'CartesianCoordinate',
    'FloatOrNDArray',
    'GeodeticCoordinate',
]
