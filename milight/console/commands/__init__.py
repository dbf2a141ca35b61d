from .bridge import app as command_app
from .zone import app as zone_app
