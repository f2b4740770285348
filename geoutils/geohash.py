import numbers

from geoutils import base32
from geoutils.errors import InvalidPrecisionError

DEFAULT_PRECISION = 10
MAX_PRECISION = 22


def encode(latitude, longitude, precision=DEFAULT_PRECISION):
    '''
    This function takes in a latitude and a longitude and returns the geohash
    of the cell holding them.
    Bits alternate between longitude and latitude (longitude first), each one
    halving the current range of its dimension. Every 5 bits make a character.
    :latitude: (float) between -90 and 90
    :longitude: (float) between -180 and 180
    :precision: (int) number of characters of the geohash
    Returns:
    :geohash: (str) the geohash
    '''
    if isinstance(precision, bool) or not isinstance(precision, numbers.Integral) or precision < 1:
        raise InvalidPrecisionError(f"Geohash precision must be a positive integer, got {precision!r}")

    latitude_range = [-90.0, 90.0]
    longitude_range = [-180.0, 180.0]

    h = []
    bit = 0b10000
    value = 0
    even = True

    while len(h) < precision:
        if even:
            current_range, coordinate = longitude_range, longitude
        else:
            current_range, coordinate = latitude_range, latitude

        middle = (current_range[0] + current_range[1]) / 2
        if coordinate >= middle:
            current_range[0] = middle
            value |= bit
        else:
            current_range[1] = middle

        bit >>= 1
        even = not even

        # We have our 5 bits, we can append the character
        if bit == 0:
            h.append(base32.valueToChar(value))
            bit = 0b10000
            value = 0

    return "".join(h)
