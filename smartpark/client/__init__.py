"""
Python client for the SmartPark API.
"""
from smartpark.client.api import SmartParkClient

__all__ = ["SmartParkClient"]
