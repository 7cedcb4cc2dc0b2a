# Sea-level static pressure [Pa]
p0 = 101_325.0  # US Standard Atmosphere 1976 sea-level pressure (1013.25 hPa)

# Sea-level standard temperature [K]
T0 = 288.15  # US Standard Atmosphere 1976 sea-level temperature (15 °C)

# Sea-level air density [kg/m^3]
rho0 = 1.225  # US Standard Atmosphere 1976 sea-level density

# Standard gravitational acceleration [m/s^2]
g0 = 9.80665

# Ratio of specific heats for dry air (gamma = cp/cv)
gamma = 1.4  # US Standard Atmosphere 1976, Table 2, p.2

# Universal gas constant [J/(kmol*K)]
R_star = 8.31432e3  # US Standard Atmosphere 1976, Table 2, p.2

# Sutherland constant [K]
S = 110.0  # US Standard Atmosphere 1976, Table 2, p.2

# Sutherland viscosity coefficient [kg/(s*m*K^0.5)]
beta_visc = 1.458e-6  # US Standard Atmosphere 1976, Table 2, p.2

# WGS84 equatorial radius [m]
WGS84_A = 6_378_137.0  # NIMA TR-8350.2

# WGS84 inverse flattening [-]
WGS84_INVERSE_FLATTENING = 298.257223563  # NIMA TR-8350.2
