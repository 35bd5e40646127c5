"""Rendering resolved plans into deployment operations."""

from dataclasses import replace
from typing import List, Mapping, Tuple

from .exceptions import UnboundReferenceError
from .types import (
    DeploymentOperation,
    Literal,
    NetworkProfile,
    OperationArgument,
    PendingAddress,
    ResolvedPlan,
)


def render(plan: ResolvedPlan, network: NetworkProfile) -> List[DeploymentOperation]:
    """
    Turn a resolved plan into contract-creation operations for a network.

    Literal arguments are emitted as their values. Module references become
    PendingAddress placeholders, to be bound once the referenced module has
    been deployed.

    Args:
        plan: Output of resolve()
        network: Target network profile

    Returns:
        Operations in plan order, indexed from 0
    """
    operations: List[DeploymentOperation] = []
    for index, step in enumerate(plan.steps):
        args: List[OperationArgument] = []
        for arg in step.args:
            if isinstance(arg, Literal):
                args.append(arg.value)
            else:
                args.append(PendingAddress(arg.module_id, arg.output_name))

        operations.append(
            DeploymentOperation(
                index=index,
                network=network.name,
                chain_id=network.chain_id,
                module_id=step.module_id,
                contract_name=step.contract_name,
                args=tuple(args),
                output_name=step.output_name,
            )
        )
    return operations


def bind(
    operation: DeploymentOperation, deployed: Mapping[Tuple[str, str], str]
) -> DeploymentOperation:
    """
    Replace placeholders with addresses reported by the executor.

    Args:
        operation: Rendered operation
        deployed: Maps (module_id, output_name) -> deployed address

    Returns:
        A new operation with no pending arguments

    Raises:
        UnboundReferenceError: If a referenced module has no address yet
    """
    args: List[OperationArgument] = []
    for arg in operation.args:
        if isinstance(arg, PendingAddress):
            if arg.key not in deployed:
                raise UnboundReferenceError(
                    f"Operation '{operation.module_id}' needs '{arg}' which has not been deployed"
                )
            args.append(deployed[arg.key])
        else:
            args.append(arg)
    return replace(operation, args=tuple(args))
