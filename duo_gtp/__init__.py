"""
Go Text Protocol front end for the Blokus Duo engine.
"""

from .config import EngineConfig
from .engine import GtpEngine, GtpFailure

__all__ = ["EngineConfig", "GtpEngine", "GtpFailure"]
