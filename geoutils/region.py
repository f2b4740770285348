import logging
import math
from collections import namedtuple

import numpy

from geoutils import base32, geohash, ranges
from geoutils.distance import E2, EARTH_EQ_RADIUS
from geoutils.errors import InvalidRadiusError

logger = logging.getLogger(__name__)

METERS_PER_DEGREE_LATITUDE = 110574
# The maximum number of bits in a geohash
MAX_BITS = geohash.MAX_PRECISION * base32.BITS_PER_CHAR
EPSILON = 1e-12

Coordinate = namedtuple("Coordinate", ["latitude", "longitude"])


class Region(namedtuple("Region", ["latitude", "longitude", "latitudeSpan", "longitudeSpan"])):
    '''
    Rectangle centered on a coordinate. Spans are the full height and width in degrees.
    '''
    __slots__ = ()

    @property
    def north(self):
        return min(90.0, self.latitude + self.latitudeSpan / 2)

    @property
    def south(self):
        return max(-90.0, self.latitude - self.latitudeSpan / 2)

    @property
    def east(self):
        return wrapLongitude(self.longitude + self.longitudeSpan / 2)

    @property
    def west(self):
        return wrapLongitude(self.longitude - self.longitudeSpan / 2)


def wrapLongitude(longitude):
    '''
    Brings a longitude that went past the antimeridian back into [-180, 180]
    '''
    if -180 <= longitude <= 180:
        return longitude

    adjusted = longitude + 180
    if adjusted > 0:
        return math.fmod(adjusted, 360) - 180
    return 180 - math.fmod(-adjusted, 360)


def longitudeDeltaAtLatitude(distance, latitude):
    '''
    This function converts a distance into degrees of longitude at a given latitude.
    :distance: (float) distance in meters
    :latitude: (float) latitude the distance is measured at
    Returns:
    :delta: (float) degrees of longitude, at most 360
    '''
    radians = numpy.deg2rad(latitude)
    numerator = numpy.cos(radians) * EARTH_EQ_RADIUS * numpy.pi / 180
    denominator = 1 / numpy.sqrt(1 - E2 * numpy.sin(radians) * numpy.sin(radians))
    meters_per_degree = numerator * denominator

    # Near the poles a single degree of longitude is almost nothing
    if meters_per_degree < EPSILON:
        return 360.0 if distance > 0 else 0.0

    return float(min(360.0, distance / meters_per_degree))


def _halvings(extent, span):
    if span <= 0:
        return MAX_BITS
    # Subnormal spans overflow the ratio
    ratio = extent / (span / 2)
    if not math.isfinite(ratio):
        return MAX_BITS
    return math.floor(math.log2(ratio))


def boundingBits(latitudeSpan, longitudeSpan):
    '''
    This function returns the number of geohash bits for which the cells are
    still large enough to cover a region with the given spans in a few cells.
    :latitudeSpan: (float) full height of the region in degrees
    :longitudeSpan: (float) full width of the region in degrees
    Returns:
    :bits: (int) between 0 and MAX_BITS
    '''
    bits_latitude = max(0, _halvings(180, latitudeSpan)) * 2
    bits_longitude = max(1, _halvings(360, longitudeSpan)) * 2 - 1
    return min(bits_latitude, bits_longitude, MAX_BITS)


def regionForLocation(center, radius):
    '''
    Returns the region enclosing a circle of radius meters around center
    '''
    latitude, longitude = center
    latitude_delta = radius / METERS_PER_DEGREE_LATITUDE
    latitude_north = min(90.0, latitude + latitude_delta)
    latitude_south = max(-90.0, latitude - latitude_delta)

    # We take the widest of both to never end up with a region too narrow
    longitude_delta = max(longitudeDeltaAtLatitude(radius, latitude_north),
                          longitudeDeltaAtLatitude(radius, latitude_south))

    return Region(latitude, longitude, latitude_delta * 2, longitude_delta * 2)


def candidateQueries(region):
    '''
    This function returns one range for each of the 9 cells around the region:
    its center and its 8 neighbours (north, south, east, west and the diagonals).
    Ranges are not merged and can be duplicates of each other.
    '''
    bits = boundingBits(region.latitudeSpan, region.longitudeSpan)
    precision = max(1, (bits - 1) // base32.BITS_PER_CHAR + 1)
    logger.debug("Region %s resolves to %d bits (%d characters)", region, bits, precision)

    queries = []
    for latitude in (region.latitude, region.north, region.south):
        for longitude in (region.longitude, region.east, region.west):
            h = geohash.encode(latitude, longitude, precision)
            queries.append(ranges.rangeFromHash(h, bits))

    return queries


def queriesForLocation(center, radius):
    '''
    This function takes in a coordinate and a radius and returns the ranges of
    geohashes covering the circle of that radius around the coordinate.
    :center: ((float, float)) latitude and longitude
    :radius: (float) radius in meters
    Returns:
    :queries: ([GeoHashRange]) disjoint ranges, sorted
    '''
    if not math.isfinite(radius) or radius < 0:
        raise InvalidRadiusError(f"Radius must be a finite number of meters >= 0, got {radius!r}")

    region = regionForLocation(center, radius)
    candidates = candidateQueries(region)
    queries = ranges.mergeRanges(candidates)
    logger.debug("Merged %d candidate ranges into %d", len(candidates), len(queries))

    return queries
