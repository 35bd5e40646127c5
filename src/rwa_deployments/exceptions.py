"""Custom exception classes for rwa-deployments library."""

from typing import List, Optional


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class DuplicateModuleError(DeploymentError, ValueError):
    """Raised when a module id is declared more than once."""

    def __init__(self, module_id: str):
        super().__init__(f"Module '{module_id}' is already declared")
        self.module_id = module_id


class CyclicDependencyError(DeploymentError, ValueError):
    """Raised when module references form a cycle."""

    def __init__(self, cycle: List[str]):
        super().__init__(f"Cyclic module dependency: {' -> '.join(cycle)}")
        self.cycle = cycle


class UnknownModuleReferenceError(DeploymentError, ValueError):
    """Raised when an argument references a module (or output) that is not declared."""

    def __init__(
        self,
        module_id: str,
        referenced_by: str,
        output_name: Optional[str] = None,
        available_output: Optional[str] = None,
    ):
        if output_name is None:
            message = f"Module '{referenced_by}' references unknown module '{module_id}'"
        else:
            message = (
                f"Module '{referenced_by}' references unknown output "
                f"'{output_name}' of module '{module_id}'"
            )
            if available_output is not None:
                message += f" (it exposes '{available_output}')"
        super().__init__(message)
        self.module_id = module_id
        self.referenced_by = referenced_by
        self.output_name = output_name
        self.available_output = available_output


class UnknownNetworkError(DeploymentError, ValueError):
    """Raised when requested network has no profile."""

    pass


class MissingConfigurationError(DeploymentError, ValueError):
    """Raised when required environment variables are not set."""

    def __init__(self, missing: List[str]):
        super().__init__(
            f"Missing required configuration: {', '.join(missing)}. "
            "Set them in the environment or in a .env file."
        )
        self.missing = missing


class DescriptorError(DeploymentError, ValueError):
    """Raised when a module descriptor file is malformed."""

    pass


class UnboundReferenceError(DeploymentError, LookupError):
    """Raised when binding an operation whose dependency has no deployed address yet."""

    pass


class NetworkMismatchError(DeploymentError, RuntimeError):
    """Raised when an RPC endpoint serves a different chain than its profile."""

    pass


class ConfigFileNotFoundError(DeploymentError, FileNotFoundError):
    """Raised when an explicitly named .env file does not exist."""

    pass
