"""Services module - init system probing and service path resolution."""

from .._output_schemas.services import ServicesPathsOutput, ServicesUserOutput
from .detect_probe import detect_os, detect_probe
from .domain_target import domain_target
from .InitSystem import InitSystem
from .MissingEnvironmentVariable import MissingEnvironmentVariable
from .PlatformProbe import PlatformProbe
from .PrivilegeLevel import PrivilegeLevel
from .ProcessQueryError import ProcessQueryError
from .ServicePaths import ServicePaths
from .ServicesConfig import ServicesConfig

__all__ = [
    "InitSystem",
    "MissingEnvironmentVariable",
    "PlatformProbe",
    "PrivilegeLevel",
    "ProcessQueryError",
    "ServicePaths",
    "ServicesConfig",
    "ServicesPathsOutput",
    "ServicesUserOutput",
    "detect_os",
    "detect_probe",
    "domain_target",
]
