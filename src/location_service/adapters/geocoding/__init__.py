"""Reverse geocoding adapters."""

from location_service.adapters.geocoding.static_reverse_geocoder import StaticReverseGeocoder

__all__ = ["StaticReverseGeocoder"]
