"""
rwa-deployments: Python library for planning RWA smart contract deployments
"""

from importlib.metadata import PackageNotFoundError, version

from .builder import ModuleBuilder, reference
from .config import load_environment, load_network_profile
from .deployments import DeploymentPlanner, plan_from_directory
from .exceptions import (
    ConfigFileNotFoundError,
    CyclicDependencyError,
    DeploymentError,
    DescriptorError,
    DuplicateModuleError,
    MissingConfigurationError,
    NetworkMismatchError,
    UnboundReferenceError,
    UnknownModuleReferenceError,
    UnknownNetworkError,
)
from .render import bind, render
from .resolver import resolve
from .types import (
    DeploymentModule,
    DeploymentOperation,
    Literal,
    ModuleOutputReference,
    NetworkProfile,
    PendingAddress,
    ResolvedPlan,
)

try:
    __version__ = version("rwa-deployments")
except PackageNotFoundError:
    __version__ = None

__all__ = [
    "DeploymentPlanner",
    "plan_from_directory",
    "ModuleBuilder",
    "reference",
    "resolve",
    "render",
    "bind",
    "load_environment",
    "load_network_profile",
    "DeploymentModule",
    "DeploymentOperation",
    "Literal",
    "ModuleOutputReference",
    "NetworkProfile",
    "PendingAddress",
    "ResolvedPlan",
    "DeploymentError",
    "ConfigFileNotFoundError",
    "DuplicateModuleError",
    "CyclicDependencyError",
    "UnknownModuleReferenceError",
    "UnknownNetworkError",
    "MissingConfigurationError",
    "DescriptorError",
    "UnboundReferenceError",
    "NetworkMismatchError",
]
