"""
LightBnB data-access layer: async repositories over users, properties and reservations.
"""

from lightbnb.config import Settings, get_settings
from lightbnb.database import Database
from lightbnb.repositories import LightBnBRepository

__version__ = "1.0.0"

__all__ = [
    "Settings",
    "get_settings",
    "Database",
    "LightBnBRepository",
]
