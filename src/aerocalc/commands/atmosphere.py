import logging

import click

from aerocalc.commands import config_option, setup, verbose_option
from aerocalc.standard_atmosphere import H_B, evaluate_atmosphere
from aerocalc.types import AtmosphereState
from aerocalc.units import AltitudeUnit, PressureUnit, SpeedUnit, TemperatureUnit

logger = logging.getLogger(__name__)

DENSITY_PRECISION = 4
VISCOSITY_PRECISION = 6


def unit_choice(enum) -> click.Choice:
    return click.Choice([m.value for m in enum], case_sensitive=False)


def format_state(
    state: AtmosphereState,
    temperature_unit: TemperatureUnit,
    pressure_unit: PressureUnit,
    speed_unit: SpeedUnit,
) -> list[tuple[str, str]]:
    """Format the fields of a valid atmosphere state for display."""
    temperature = temperature_unit.from_kelvin(state.temperature)
    pressure = pressure_unit.from_pascals(state.pressure)
    sound = speed_unit.from_mps(state.speed_of_sound)
    return [
        ('Temperature', f'{temperature:.2f} {temperature_unit.symbol}'),
        ('Pressure', f'{pressure:.{pressure_unit.precision}f} {pressure_unit.symbol}'),
        ('Density', f'{state.density:.{DENSITY_PRECISION}f} kg/m^3'),
        ('Speed of sound', f'{sound:.{speed_unit.precision}f} {speed_unit.symbol}'),
        (
            'Dynamic viscosity',
            f'{state.dynamic_viscosity:.{VISCOSITY_PRECISION}e} Pa*s',
        ),
        (
            'Kinematic viscosity',
            f'{state.kinematic_viscosity:.{VISCOSITY_PRECISION}e} m^2/s',
        ),
    ]


@click.command()
@click.argument('altitude', type=float)
@click.option(
    '-a',
    '--altitude-unit',
    type=unit_choice(AltitudeUnit),
    default=None,
    help='Unit of ALTITUDE (default from configuration).',
)
@click.option(
    '-t',
    '--temperature-unit',
    type=unit_choice(TemperatureUnit),
    default=None,
    help='Temperature output unit.',
)
@click.option(
    '-p',
    '--pressure-unit',
    type=unit_choice(PressureUnit),
    default=None,
    help='Pressure output unit.',
)
@click.option(
    '-s',
    '--speed-unit',
    type=unit_choice(SpeedUnit),
    default=None,
    help='Speed of sound output unit.',
)
@config_option
@verbose_option
def run(
    altitude,
    altitude_unit,
    temperature_unit,
    pressure_unit,
    speed_unit,
    config_file,
    verbose,
):
    """Print US Standard Atmosphere 1976 properties at ALTITUDE.

    Use `--` before a negative altitude."""
    cfg = setup(config_file, verbose)
    display = cfg.display

    alt_unit = AltitudeUnit(altitude_unit or display.altitude_unit)
    altitude_m = alt_unit.to_meters(altitude)
    logger.debug('Evaluating atmosphere at %s m', altitude_m)

    state = evaluate_atmosphere(altitude_m)
    if not state.valid:
        raise click.ClickException(
            f'Altitude {altitude} {alt_unit} is above the top of the standard '
            f'atmosphere ({H_B[-1]:.0f} m).'
        )

    lines = format_state(
        state,
        TemperatureUnit(temperature_unit or display.temperature_unit),
        PressureUnit(pressure_unit or display.pressure_unit),
        SpeedUnit(speed_unit or display.speed_unit),
    )
    width = max(len(label) for label, _ in lines) + 2
    for label, value in lines:
        click.echo(f'{label + ":":<{width}}{value}')


if __name__ == '__main__':
    run()
