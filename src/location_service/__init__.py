"""Geospatial helpers: current location, geohash encoding and distance."""
