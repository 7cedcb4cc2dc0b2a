import io

import pandas as pd
import pytest
from click.testing import CliRunner

from aerocalc.commands.atmosphere import run as atmosphere
from aerocalc.commands.atmosphere_profile import altitude_grid
from aerocalc.commands.atmosphere_profile import run as atmosphere_profile
from aerocalc.commands.wgs84 import cli as wgs84
from aerocalc.types import AtmosphereState


@pytest.fixture
def runner():
    return CliRunner()


def parse_values(output):
    """Map each `label: value unit` line of command output to its number."""
    values = {}
    for line in output.splitlines():
        label, _, rest = line.partition(':')
        values[label.strip()] = float(rest.split()[0])
    return values


class TestAtmosphereCommand:
    def test_sea_level(self, runner):
        result = runner.invoke(atmosphere, ['0'])
        assert result.exit_code == 0, result.output

        lines = result.output.splitlines()
        assert len(lines) == 6
        assert lines[0].startswith('Temperature:')
        assert lines[0].endswith('288.15 K')
        assert lines[1].endswith('101325.0 Pa')
        assert lines[2].endswith('1.2250 kg/m^3')
        assert lines[3].endswith('340.29 m/s')
        assert 'Pa*s' in lines[4]
        assert 'm^2/s' in lines[5]
        # Values are aligned in a single column.
        assert len({line.index(line.split()[-2]) for line in lines}) == 1

    def test_output_units(self, runner):
        result = runner.invoke(atmosphere, ['-t', 'C', '-p', 'hpa', '-s', 'kmh', '0'])
        assert result.exit_code == 0, result.output
        assert '15.00 °C' in result.output
        assert '1013.250 hPa' in result.output
        assert 'km/h' in result.output

    def test_altitude_in_feet(self, runner):
        result = runner.invoke(atmosphere, ['-a', 'ft', '50000'])
        assert result.exit_code == 0, result.output
        assert parse_values(result.output)['Temperature'] == 216.65

    def test_negative_altitude(self, runner):
        result = runner.invoke(atmosphere, ['--', '-500'])
        assert result.exit_code == 0, result.output
        assert parse_values(result.output)['Temperature'] == pytest.approx(291.4)

    def test_above_model(self, runner):
        result = runner.invoke(atmosphere, ['90000'])
        assert result.exit_code == 1
        assert 'above the top of the standard atmosphere' in result.output

    def test_invalid_unit(self, runner):
        result = runner.invoke(atmosphere, ['-p', 'torr', '0'])
        assert result.exit_code == 2

    def test_config_file(self, runner, tmp_path):
        config_file = tmp_path / 'display.toml'
        config_file.write_text(
            '[display]\ntemperature_unit = "F"\npressure_unit = "psi"\n'
        )
        result = runner.invoke(atmosphere, ['--config', str(config_file), '0'])
        assert result.exit_code == 0, result.output
        assert '59.00 °F' in result.output
        assert '14.69595 psi' in result.output

    def test_options_override_config(self, runner, tmp_path):
        config_file = tmp_path / 'display.toml'
        config_file.write_text('[display]\ntemperature_unit = "F"\n')
        result = runner.invoke(
            atmosphere, ['-c', str(config_file), '-t', 'r', '0']
        )
        assert result.exit_code == 0, result.output
        assert '518.67 °R' in result.output


class TestAtmosphereProfileCommand:
    def test_altitude_grid(self):
        assert list(altitude_grid(0.0, 3000.0, 1000.0)) == [0.0, 1000.0, 2000.0, 3000.0]
        assert list(altitude_grid(0.0, 2500.0, 1000.0)) == [0.0, 1000.0, 2000.0]
        assert list(altitude_grid(500.0, 500.0, 10.0)) == [500.0]

    def test_stdout(self, runner):
        args = ['--stop', '20000', '--step', '5000']
        result = runner.invoke(atmosphere_profile, args)
        assert result.exit_code == 0, result.output

        df = pd.read_csv(io.StringIO(result.stdout), index_col='altitude')
        assert list(df.index) == [0.0, 5000.0, 10000.0, 15000.0, 20000.0]
        assert list(df.columns) == AtmosphereState.field_names()
        assert df.loc[0.0, 'pressure'] == 101325.0
        assert df['valid'].all()

    def test_default_range(self, runner):
        result = runner.invoke(atmosphere_profile, [])
        assert result.exit_code == 0, result.output
        df = pd.read_csv(io.StringIO(result.stdout), index_col='altitude')
        assert len(df) == 85
        assert df.index[-1] == 84000.0

    def test_invalid_rows(self, runner):
        args = ['--start', '80000', '--stop', '90000', '--step', '5000']
        result = runner.invoke(atmosphere_profile, args)
        assert result.exit_code == 0, result.output
        df = pd.read_csv(io.StringIO(result.stdout), index_col='altitude')
        assert list(df['valid']) == [True, False, False]
        assert df.loc[90000.0, 'temperature'] == 0.0

    def test_output_file(self, runner, tmp_path):
        output = tmp_path / 'profile.csv'
        result = runner.invoke(
            atmosphere_profile, ['--stop', '2000', '--step', '500', '-o', str(output)]
        )
        assert result.exit_code == 0, result.output
        assert result.stdout == ''

        df = pd.read_csv(output, index_col='altitude')
        assert len(df) == 5
        assert df.loc[0.0, 'temperature'] == 288.15

    @pytest.mark.parametrize(
        'args',
        [['--step', '0'], ['--step', '-10'], ['--start', '1000', '--stop', '0']],
    )
    def test_bad_range(self, runner, args):
        result = runner.invoke(atmosphere_profile, args)
        assert result.exit_code == 2


class TestWgs84Command:
    def test_geo2xyz(self, runner):
        result = runner.invoke(wgs84, ['geo2xyz', '0', '0', '0'])
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            'x: 6378137.0000 m',
            'y: 0.0000 m',
            'z: 0.0000 m',
        ]

    def test_geo2xyz_reference_point(self, runner):
        result = runner.invoke(wgs84, ['geo2xyz', '49', '17', '1000'])
        assert result.exit_code == 0, result.output
        values = parse_values(result.output)
        assert values['x'] == pytest.approx(4009873, abs=1.0)
        assert values['y'] == pytest.approx(1225941, abs=1.0)
        assert values['z'] == pytest.approx(4791313, abs=1.0)

    def test_geo2xyz_negative_arguments(self, runner):
        result = runner.invoke(wgs84, ['geo2xyz', '--', '-33.9', '-70.6', '500'])
        assert result.exit_code == 0, result.output
        values = parse_values(result.output)
        assert values['y'] < 0.0
        assert values['z'] < 0.0

    @pytest.mark.parametrize('args', [['91', '0', '0'], ['0', '181', '0']])
    def test_geo2xyz_out_of_range(self, runner, args):
        result = runner.invoke(wgs84, ['geo2xyz', *args])
        assert result.exit_code == 2

    def test_xyz2geo(self, runner):
        result = runner.invoke(wgs84, ['xyz2geo', '4009873', '1225941', '4791313'])
        assert result.exit_code == 0, result.output
        values = parse_values(result.output)
        assert values['lat'] == pytest.approx(49.0, abs=1e-5)
        assert values['lon'] == pytest.approx(17.0, abs=1e-5)
        assert values['alt'] == pytest.approx(1000.0, abs=1.0)
        # Nine decimal places for angles by default.
        assert len(result.output.splitlines()[0].split()[1].split('.')[1]) == 9

    def test_xyz2geo_negative_arguments(self, runner):
        result = runner.invoke(wgs84, ['xyz2geo', '--', '-6378137', '0', '0'])
        assert result.exit_code == 0, result.output
        assert parse_values(result.output)['lon'] == pytest.approx(180.0)

    def test_xyz2geo_origin(self, runner):
        result = runner.invoke(wgs84, ['xyz2geo', '0', '0', '0'])
        assert result.exit_code == 1
        assert 'undefined for this position' in result.output

    def test_xyz2geo_north_pole(self, runner):
        result = runner.invoke(wgs84, ['xyz2geo', '0', '0', '6357752.314245'])
        assert result.exit_code == 0, result.output
        values = parse_values(result.output)
        assert values['lat'] == pytest.approx(90.0)
        assert values['alt'] == pytest.approx(1000.0, abs=1e-3)

    def test_xyz2geo_below_south_pole(self, runner):
        result = runner.invoke(wgs84, ['xyz2geo', '--', '0', '0', '-6361752.314245'])
        assert result.exit_code == 1
        assert 'polar axis' in result.output

    def test_config_ellipsoid_and_precision(self, runner, tmp_path):
        config_file = tmp_path / 'clarke.toml'
        config_file.write_text(
            '[ellipsoid]\n'
            'equatorial_radius = 6378206.4\n'
            'inverse_flattening = 294.978698214\n'
            '[display]\n'
            'length_precision = 1\n'
        )
        result = runner.invoke(
            wgs84, ['--config', str(config_file), 'geo2xyz', '0', '0', '0']
        )
        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[0] == 'x: 6378206.4 m'
