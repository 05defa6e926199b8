"""
API endpoint wrappers for the Fantasy Premier League API.
"""

from .entries import *
from .fixtures import *
from .gameweeks import *
from .leagues import *
from .static import *
