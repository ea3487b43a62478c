"""
Logging setup for the pedometer
"""

from pedometer.logging.setup import setup_logging

__all__ = ["setup_logging"]
