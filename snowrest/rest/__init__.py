""" A facade over discord's REST API: typed handles for resources,
per resource services and a shared router. Anything that is not
documented by discord will not be found here.
"""

from .builders import *
from .client import *
from .entities import *
from .errors import *
from .pagination import *
from .response import *
from .route import *
from .router import *
from .services import *
