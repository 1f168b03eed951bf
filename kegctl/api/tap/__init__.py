"""Tap module - formula repository registration."""

from .._output_schemas.tap import TapListOutput, TapTapOutput
from .InvalidTapNameError import InvalidTapNameError
from .Tap import Tap
from .TapNoCustomRemoteError import TapNoCustomRemoteError
from .TapRegistry import TapRegistry
from .TapRemoteMismatchError import TapRemoteMismatchError

__all__ = [
    "InvalidTapNameError",
    "Tap",
    "TapListOutput",
    "TapNoCustomRemoteError",
    "TapRegistry",
    "TapRemoteMismatchError",
    "TapTapOutput",
]
