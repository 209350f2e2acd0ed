# time
SECONDS_PER_DAY = 86400
MINUTES_PER_DAY = 1440
DAY_IN_MILLIS = 86400000
UNIX_EPOCH_JD = 2440587.5
J2000_JD = 2451545.0
DAYS_PER_CENTURY = 36525.0

# Default difference between terrestrial time and universal time in seconds.
DELTAT = 67.0

# earth
EARTH_EQUITORIAL_RADIUS_METERS = 6378140.0
EARTH_AXIS_RATIO = 0.99664719
AU = 149597870.7
EARTH_SIDEREAL_RATE = 360.985647

# standard atmosphere
STANDARD_PRESSURE = 1010.0
STANDARD_TEMPERATURE = 10.0

# sun elevation thresholds, degrees
SUN_RADIUS = 0.26667
HORIZON_REFRACTION = 0.5667
H0_PRIME = -SUN_RADIUS - HORIZON_REFRACTION
CIVIL_TWILIGHT = -6.0
NAUTICAL_TWILIGHT = -12.0
ASTRONOMICAL_TWILIGHT = -18.0
