import logging
import os

from geoutils import distance, geohash, region

LOG_LEVEL = os.getenv("GEOQUERIES_LOG_LEVEL", "WARNING")
DEFAULT_PRECISION = int(os.getenv("GEOQUERIES_DEFAULT_PRECISION", geohash.DEFAULT_PRECISION))

RADIUS = 4828.03 # meters, 3 miles

logger = logging.getLogger(__name__)


def encode(coordinate, precision=DEFAULT_PRECISION):
    '''
    This function returns the geohash of a coordinate
    :coordinate: ((float, float)) latitude and longitude
    :precision: (int) number of characters of the geohash
    '''
    latitude, longitude = coordinate
    return geohash.encode(latitude, longitude, precision)


def distanceMeters(origin, destination):
    '''
    This function returns the distance in meters between two coordinates
    '''
    return distance.distance(origin, destination)


def queryBounds(center, radius):
    '''
    This function is called to know which geohashes to scan for the points
    around a location.
    Each returned (start, end) pair is a range scan [start, end) on a geohash
    sorted index. A point can show up in more than one scan, so results need to
    be de-duplicated by the caller.
    :center: ((float, float)) latitude and longitude of the search
    :radius: (float) radius of the search in meters
    Returns:
    :bounds: ([(str, str)]) sorted list of ranges
    '''
    queries = region.queriesForLocation(center, radius)
    logger.debug("%d ranges for a %s meters radius around %s", len(queries), radius, center)

    return [query.asTuple() for query in queries]


if __name__ == '__main__':
    logging.basicConfig(level=LOG_LEVEL)

    location = (40.56230175831099, -74.5975943979423)

    print(encode(location))

    bounds = queryBounds(location, RADIUS)
    print(len(bounds))
    for start, end in bounds:
        print(start, end)

    print(distanceMeters(location, (40.6892, -74.0445)))
