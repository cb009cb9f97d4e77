"""SQLAlchemy models for the LoonCamp admin API.

All models are imported here so that ``Base.metadata`` knows every table
before ``create_all`` runs. If you add a new model, import it in this file.
"""

from looncamp.models.admin import Admin
from looncamp.models.property import Property, PropertyImage

__all__ = [
    "Admin",
    "Property",
    "PropertyImage",
]
