from .content import *  # NOQA
from .headers import *  # NOQA
from .response import *  # NOQA
from .urllib3_response import *  # NOQA
