"""Module declaration for rwa-deployments library."""

from typing import Any, Dict, Iterable, List

from .constants import DEFAULT_OUTPUT
from .exceptions import DuplicateModuleError
from .types import DeploymentModule, ModuleOutputReference, as_argument


def reference(module_id: str, output_name: str = DEFAULT_OUTPUT) -> ModuleOutputReference:
    """Refer to the deployed output of another module."""
    return ModuleOutputReference(module_id, output_name)


class ModuleBuilder:
    """
    Collects deployment modules before a single resolve() call.

    Modules keep the order they were declared in; the resolver uses it to
    break ties between modules with no ordering constraint.
    """

    def __init__(self) -> None:
        self._modules: Dict[str, DeploymentModule] = {}

    def declare_module(
        self,
        id: str,
        contract_name: str,
        args: Iterable[Any] = (),
        output_name: str = DEFAULT_OUTPUT,
    ) -> DeploymentModule:
        """
        Register a module under a unique id.

        Args:
            id: Module identifier (e.g., "SaleEscrowModule")
            contract_name: Contract to deploy (e.g., "SaleEscrow")
            args: Constructor arguments; plain values become Literal
            output_name: Name other modules use to reference this deployment

        Returns:
            The declared DeploymentModule

        Raises:
            DuplicateModuleError: If id is already declared
        """
        if id in self._modules:
            raise DuplicateModuleError(id)

        module = DeploymentModule(
            id=id,
            contract_name=contract_name,
            args=tuple(as_argument(arg) for arg in args),
            output_name=output_name,
        )
        self._modules[id] = module
        return module

    def add(self, module: DeploymentModule) -> DeploymentModule:
        """Register an already-built module (e.g. parsed from a descriptor file)."""
        if module.id in self._modules:
            raise DuplicateModuleError(module.id)
        self._modules[module.id] = module
        return module

    def modules(self) -> List[DeploymentModule]:
        return list(self._modules.values())

    def __contains__(self, module_id: object) -> bool:
        return module_id in self._modules

    def __len__(self) -> int:
        return len(self._modules)
