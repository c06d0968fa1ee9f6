"""CLI commands"""

from . import deploy
from . import validate
from . import units
from . import doctor

__all__ = [
    "deploy",
    "validate",
    "units",
    "doctor",
]
