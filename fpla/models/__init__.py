"""
Pydantic models for Fantasy Premier League API responses.
"""

from .bootstrap import *
from .common import *
from .fixture import *
from .league import *
from .live import *
from .picks import *
from .transfer import *
from .user import *
