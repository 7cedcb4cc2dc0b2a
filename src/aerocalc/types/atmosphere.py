from dataclasses import asdict, dataclass, fields


@dataclass(frozen=True)
class AtmosphereState:
    """Atmospheric properties at a single geometric altitude.

    When `valid` is false the altitude was outside the modeled range and all
    numeric fields are zero; they must not be used."""

    temperature: float = 0.0
    """Static temperature [K]."""

    pressure: float = 0.0
    """Static pressure [Pa]."""

    density: float = 0.0
    """Air density [kg/m^3]."""

    speed_of_sound: float = 0.0
    """Speed of sound [m/s]."""

    dynamic_viscosity: float = 0.0
    """Dynamic viscosity [Pa*s]."""

    kinematic_viscosity: float = 0.0
    """Kinematic viscosity [m^2/s]."""

    valid: bool = False
    """Whether the altitude was inside the modeled range."""

    @classmethod
    def invalid(cls) -> 'AtmosphereState':
        """State returned for altitudes outside the model."""
        return cls()

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def as_dict(self) -> dict[str, float | bool]:
        return asdict(self)
