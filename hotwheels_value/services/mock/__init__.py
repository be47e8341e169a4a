"""Offline mock data"""

from .mock_data import generate_mock_data, generate_mock_listing

__all__ = ["generate_mock_data", "generate_mock_listing"]
