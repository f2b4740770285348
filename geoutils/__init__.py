'''
Geohash helpers: encoding, distances and range queries around a location.
'''
