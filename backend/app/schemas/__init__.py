# app/schemas/__init__.py
"""
Schema module initialization.
Exports all schema classes from submodules for convenient imports.
"""
from .common import *
from .profile import *
from .settings import *
from .subscription import *
from .status import *
