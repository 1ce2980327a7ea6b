from .exceptions import *  # NOQA
from .value_object import *  # NOQA
