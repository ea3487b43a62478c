"""
Configuration for the pedometer
"""

from pedometer.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
