import click

from aerocalc.commands import config_option, setup, verbose_option
from aerocalc.geodesy import geo2wgs, is_finite_position, wgs2geo
from aerocalc.units import deg2rad, rad2deg


@click.group()
@config_option
@verbose_option
@click.pass_context
def cli(ctx, config_file, verbose):
    """Convert between geodetic and ECEF coordinates.

    Use `--` before the coordinates if any of them is negative."""
    ctx.ensure_object(dict)
    cfg = setup(config_file, verbose)
    ctx.obj['ellipsoid'] = cfg.ellipsoid.ellipsoid
    ctx.obj['display'] = cfg.display


@cli.command()
@click.argument('lat', type=float)
@click.argument('lon', type=float)
@click.argument('alt', type=float)
@click.pass_context
def geo2xyz(ctx, lat, lon, alt):
    """Convert LAT, LON [deg] and ALT [m] to ECEF X, Y, Z [m]."""
    if not -90.0 <= lat <= 90.0:
        raise click.BadParameter('must be in [-90, 90] degrees', param_hint='LAT')
    if not -180.0 <= lon <= 180.0:
        raise click.BadParameter('must be in [-180, 180] degrees', param_hint='LON')

    precision = ctx.obj['display'].length_precision
    x, y, z = geo2wgs(deg2rad(lat), deg2rad(lon), alt, ctx.obj['ellipsoid'])
    click.echo(f'x: {x:.{precision}f} m')
    click.echo(f'y: {y:.{precision}f} m')
    click.echo(f'z: {z:.{precision}f} m')


@cli.command()
@click.argument('x', type=float)
@click.argument('y', type=float)
@click.argument('z', type=float)
@click.pass_context
def xyz2geo(ctx, x, y, z):
    """Convert ECEF X, Y, Z [m] to latitude, longitude [deg] and altitude [m]."""
    display = ctx.obj['display']
    coord = wgs2geo(x, y, z, ctx.obj['ellipsoid'])
    if not is_finite_position(coord):
        raise click.ClickException(
            'The geodetic conversion is undefined for this position, which is '
            'on or near the polar axis.'
        )

    lat, lon, alt = coord
    click.echo(f'lat: {rad2deg(lat):.{display.angle_precision}f} deg')
    click.echo(f'lon: {rad2deg(lon):.{display.angle_precision}f} deg')
    click.echo(f'alt: {alt:.{display.length_precision}f} m')


if __name__ == '__main__':
    cli()
