import logging

from .models.base import *
from .models.guilds import *
from .models.roles import *
from .responses import *
from .exceptions import *
from .utils import *
from .fetch import *
from .config import *
from .roles import *

logging.basicConfig(level=CONFIG.LOG_LEVEL)

init_sentry()
