"""A small set of tools for formatting terminal output with control sequences."""

from . import fragments, predefined
from .__about__ import __version__
from .core import *
from .support import *
