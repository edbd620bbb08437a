"""
Core engine for SmoothieOps: the blender and the session that fills and
drains it.
"""

from .blender import Blender
from .session import SessionResult, run_session

__all__ = ["Blender", "SessionResult", "run_session"]
