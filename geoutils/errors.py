'''
Exceptions raised by the geohash helpers.
'''


class GeoQueryError(ValueError):
    '''Base class for invalid arguments passed to the geohash helpers.'''


class InvalidPrecisionError(GeoQueryError):
    '''Raised when a geohash precision is not a positive integer.'''


class InvalidRadiusError(GeoQueryError):
    '''Raised when a search radius is negative or not a finite number.'''


class CorruptGeohashError(RuntimeError):
    '''Raised when a geohash holds a character outside the base32 alphabet.'''
