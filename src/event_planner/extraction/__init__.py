"""
Extractors that mine structured entities from the assistant's reply.
"""

from .places import PlaceExtractor, detect_categories
from .schedule import extract_schedule, parse_time, classify_activity

__all__ = ['PlaceExtractor', 'detect_categories', 'extract_schedule', 'parse_time', 'classify_activity']
