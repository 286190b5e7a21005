""" An asyncio facade over discord's REST API, built around typed
handles for its resources and lazy pagination of its listings.
"""

__version__ = "0.1.0"

from .events import *
from .snowflake import *
