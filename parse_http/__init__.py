# -*- coding: utf-8 -*-
# (c) Nelen & Schuurmans

from .base.domain.exceptions import *  # NOQA
from .base.domain.value_object import ValueObject  # NOQA
from .http.content import *  # NOQA
from .http.headers import Headers  # NOQA
from .http.response import *  # NOQA
from .http.urllib3_response import from_urllib3  # NOQA

# fmt: off
__version__ = '0.0.1.dev0'
# fmt: on
