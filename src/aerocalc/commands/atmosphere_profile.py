import logging

import click
import numpy as np

from aerocalc.commands import config_option, setup, verbose_option
from aerocalc.standard_atmosphere import atmosphere_profile

logger = logging.getLogger(__name__)


def altitude_grid(start: float, stop: float, step: float) -> np.ndarray:
    """Evenly spaced altitudes from `start` to `stop` inclusive."""
    if step <= 0.0:
        raise click.BadParameter('must be positive', param_hint='--step')
    if stop < start:
        raise click.BadParameter('must not be below --start', param_hint='--stop')
    n = int(np.floor((stop - start) / step + 1.0e-9)) + 1
    return start + step * np.arange(n)


@click.command()
@click.option(
    '--start', type=float, default=0.0, show_default=True, help='Lowest altitude [m].'
)
@click.option(
    '--stop',
    type=float,
    default=84852.0,
    show_default=True,
    help='Highest altitude [m].',
)
@click.option(
    '--step', type=float, default=1000.0, show_default=True, help='Spacing [m].'
)
@click.option(
    '-o',
    '--output',
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help='Output CSV file (default: stdout).',
)
@config_option
@verbose_option
def run(start, stop, step, output, config_file, verbose):
    """Write a table of standard atmosphere properties as CSV, in SI units."""
    setup(config_file, verbose)

    altitudes = altitude_grid(start, stop, step)
    df = atmosphere_profile(altitudes)
    n_invalid = int((~df['valid']).sum())
    if n_invalid > 0:
        logger.warning(
            '%d altitude(s) above the standard atmosphere were marked invalid',
            n_invalid,
        )

    if output is None:
        click.echo(df.to_csv(), nl=False)
    else:
        df.to_csv(output)
        logger.info('Wrote %d rows to %s', len(df), output)


if __name__ == '__main__':
    run()
