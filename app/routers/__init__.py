from . import auth
from . import locations
from . import viewings
