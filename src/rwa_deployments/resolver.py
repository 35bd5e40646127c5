"""Dependency resolution for rwa-deployments library."""

import heapq
import logging
from typing import Dict, Iterable, List

from .exceptions import CyclicDependencyError, DuplicateModuleError, UnknownModuleReferenceError
from .types import DeploymentModule, ModuleOutputReference, ResolvedPlan, ResolvedStep

logger = logging.getLogger(__name__)


def _index_modules(modules: Iterable[DeploymentModule]) -> Dict[str, DeploymentModule]:
    indexed: Dict[str, DeploymentModule] = {}
    for module in modules:
        if module.id in indexed:
            raise DuplicateModuleError(module.id)
        indexed[module.id] = module
    return indexed


def _check_references(indexed: Dict[str, DeploymentModule]) -> None:
    for module in indexed.values():
        for arg in module.args:
            if not isinstance(arg, ModuleOutputReference):
                continue
            target = indexed.get(arg.module_id)
            if target is None:
                raise UnknownModuleReferenceError(arg.module_id, module.id)
            if arg.output_name != target.output_name:
                raise UnknownModuleReferenceError(
                    arg.module_id, module.id, arg.output_name, target.output_name
                )


def _find_cycle(remaining: List[str], indexed: Dict[str, DeploymentModule]) -> List[str]:
    """
    Walk dependencies from the first unresolved module until one repeats.

    Every unresolved module has at least one unresolved dependency, so the
    walk always closes a loop.
    """
    pending = set(remaining)
    path: List[str] = []
    position: Dict[str, int] = {}
    current = remaining[0]
    while current not in position:
        position[current] = len(path)
        path.append(current)
        current = next(dep for dep in indexed[current].dependencies if dep in pending)
    return path[position[current]:] + [current]


def resolve(modules: Iterable[DeploymentModule]) -> ResolvedPlan:
    """
    Order modules so every referenced module precedes the modules referencing it.

    Modules with no ordering constraint between them keep their input order,
    so resolving the same input always yields the same plan.

    Args:
        modules: Modules in declaration order

    Returns:
        ResolvedPlan with one step per module

    Raises:
        DuplicateModuleError: If two modules share an id
        UnknownModuleReferenceError: If an argument references a module (or
            output) not present in modules
        CyclicDependencyError: If references form a cycle
    """
    indexed = _index_modules(modules)
    _check_references(indexed)

    order = {module_id: i for i, module_id in enumerate(indexed)}
    in_degree = {module_id: len(module.dependencies) for module_id, module in indexed.items()}
    dependents: Dict[str, List[str]] = {module_id: [] for module_id in indexed}
    for module in indexed.values():
        for dep in module.dependencies:
            dependents[dep].append(module.id)

    # Min-heap on declaration index keeps the tie-break deterministic
    ready = [order[module_id] for module_id, degree in in_degree.items() if degree == 0]
    heapq.heapify(ready)
    ids = list(indexed)

    steps: List[ResolvedStep] = []
    while ready:
        module = indexed[ids[heapq.heappop(ready)]]
        steps.append(
            ResolvedStep(
                module_id=module.id,
                contract_name=module.contract_name,
                args=module.args,
                output_name=module.output_name,
            )
        )
        for dependent in dependents[module.id]:
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                heapq.heappush(ready, order[dependent])

    if len(steps) != len(indexed):
        remaining = [module_id for module_id in ids if in_degree[module_id] > 0]
        cycle = _find_cycle(remaining, indexed)
        logger.debug("Unresolvable modules: %s", remaining)
        raise CyclicDependencyError(cycle)

    logger.debug("Resolved deployment order: %s", [step.module_id for step in steps])
    return ResolvedPlan(steps=tuple(steps))
