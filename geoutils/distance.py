import math

import numpy

# The equatorial radius of the earth in meters
EARTH_EQ_RADIUS = 6378137
# Assumes a polar radius of r_p = 6356752.3 and an equatorial radius of r_e = 6378137,
# e2 == (r_e^2 - r_p^2)/(r_e^2)
E2 = 0.00669447819799
# Mean radius of the ellipsoid, (2a + b) / 3
EARTH_MEAN_RADIUS = (2 * EARTH_EQ_RADIUS + EARTH_EQ_RADIUS * math.sqrt(1 - E2)) / 3


def distance(origin, destination):
    """
    Calculate the Haversine distance.

    Args
        origin : tuple of float (lat, long)
        destination : tuple of float (lat, long)

    Returns:
        distance_in_meters : float

    """
    lat1, lon1 = numpy.deg2rad(origin[0]), numpy.deg2rad(origin[1])
    lat2, lon2 = numpy.deg2rad(destination[0]), numpy.deg2rad(destination[1])

    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = (math.sin(dlat / 2) * math.sin(dlat / 2) +
         math.cos(lat1) * math.cos(lat2) *
         math.sin(dlon / 2) * math.sin(dlon / 2))
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return float(EARTH_MEAN_RADIUS * c)
