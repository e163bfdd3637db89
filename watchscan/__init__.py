"""Luxury watch photo analysis service."""
