'''
Geohash ranges and the joining of overlapping ranges.

A range [start, end) covers every geohash that sorts between its two bounds.
Because every prefix of a geohash is its enclosing cell, a cell of any
precision is a single range, and a set of nearby cells usually collapses into
a handful of ranges once the ones that touch or overlap are joined.
'''
import functools
import logging
from dataclasses import dataclass

from geoutils import base32
from geoutils.errors import CorruptGeohashError

logger = logging.getLogger(__name__)

UNBOUNDED_SUFFIX = "~"


@functools.total_ordering
@dataclass(frozen=True)
class Bound:
    '''
    One end of a range. With unbounded set, the bound sits after every
    geohash starting with prefix (rendered as prefix + "~").
    '''
    prefix: str
    unbounded: bool = False

    def sortKey(self):
        values = []
        for char in self.prefix:
            value = base32.charToValue(char)
            if value == base32.NOT_FOUND:
                raise CorruptGeohashError(f"{char!r} is not a geohash character (in {self.prefix!r})")
            values.append(value)

        if self.unbounded:
            values.append(len(base32.BASE32))

        return tuple(values)

    def __lt__(self, other):
        if not isinstance(other, Bound):
            return NotImplemented
        return self.sortKey() < other.sortKey()

    def __str__(self):
        if self.unbounded:
            return self.prefix + UNBOUNDED_SUFFIX
        return self.prefix

    @classmethod
    def fromString(cls, value):
        if value.endswith(UNBOUNDED_SUFFIX):
            return cls(value[:-1], unbounded=True)
        return cls(value)


@dataclass(frozen=True)
class GeoHashRange:
    start: Bound
    end: Bound

    @classmethod
    def fromStrings(cls, start, end):
        return cls(Bound.fromString(start), Bound.fromString(end))

    def asTuple(self):
        return str(self.start), str(self.end)

    def contains(self, geohash):
        '''
        Returns True if a stored geohash would be returned by a scan of this range
        '''
        return self.start <= Bound(geohash) < self.end

    def isPrefixTo(self, other):
        return self.end >= other.start and self.start < other.start and self.end < other.end

    def isSuperRangeOf(self, other):
        return self.start <= other.start and self.end >= other.end

    def canJoinWith(self, other):
        return (self.isPrefixTo(other) or other.isPrefixTo(self) or
                self.isSuperRangeOf(other) or other.isSuperRangeOf(self))

    def joinWith(self, other):
        '''
        Returns the smallest range covering both ranges, None if they can't be joined
        '''
        if self.isPrefixTo(other):
            return GeoHashRange(self.start, other.end)
        if other.isPrefixTo(self):
            return GeoHashRange(other.start, self.end)
        if self.isSuperRangeOf(other):
            return self
        if other.isSuperRangeOf(self):
            return other
        return None

    def __str__(self):
        return "[%s, %s)" % self.asTuple()


def rangeFromHash(geohash, bits):
    '''
    This function takes in a geohash and a number of bits and returns the range
    of the cell holding the geohash at that bits precision.
    :geohash: (str) geohash at least as long as the precision needed for the bits
    :bits: (int) number of significant bits
    Returns:
    :range: (GeoHashRange) the cell's range
    '''
    if bits < 0:
        raise ValueError(f"Number of bits can't be negative, got {bits}")

    # No bits at all means the whole world
    if bits == 0:
        return GeoHashRange(Bound(""), Bound("", unbounded=True))

    precision = (bits - 1) // base32.BITS_PER_CHAR + 1
    if len(geohash) < precision:
        return GeoHashRange(Bound(geohash), Bound(geohash, unbounded=True))

    geohash = geohash[:precision]
    base = geohash[:-1]
    last_value = base32.charToValue(geohash[-1])
    if last_value == base32.NOT_FOUND:
        raise CorruptGeohashError(f"{geohash[-1]!r} is not a geohash character (in {geohash!r})")

    significant_bits = bits - len(base) * base32.BITS_PER_CHAR
    unused_bits = base32.BITS_PER_CHAR - significant_bits
    start_value = (last_value >> unused_bits) << unused_bits
    end_value = start_value + (1 << unused_bits)

    start = Bound(base + base32.valueToChar(start_value))
    if end_value > 31:
        end = Bound(base, unbounded=True)
    else:
        end = Bound(base + base32.valueToChar(end_value))

    return GeoHashRange(start, end)


def findJoinablePair(ranges):
    '''
    Returns the indexes of the first two ranges that can be joined, None if there are none
    '''
    for i in range(len(ranges)):
        for j in range(i + 1, len(ranges)):
            if ranges[i].canJoinWith(ranges[j]):
                return i, j
    return None


def mergeRanges(ranges):
    '''
    This function takes in a list of ranges and joins the ones that overlap,
    touch or contain each other until no two of them can be joined anymore.
    Every join replaces two ranges by one, so this runs at most len(ranges) - 1 times.
    :ranges: ([GeoHashRange]) ranges to merge
    Returns:
    :merged: ([GeoHashRange]) disjoint ranges, sorted
    '''
    # We drop exact duplicates first, keeping the order
    merged = list(dict.fromkeys(ranges))

    while len(merged) > 1:
        pair = findJoinablePair(merged)
        if pair is None:
            break

        first, second = merged[pair[0]], merged[pair[1]]
        joined = first.joinWith(second)
        logger.debug("Joining %s and %s into %s", first, second, joined)

        merged = [r for index, r in enumerate(merged) if index not in pair]
        if joined not in merged:
            merged.append(joined)

    return sorted(merged, key=lambda r: (r.start, r.end))
