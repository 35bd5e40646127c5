"""Data types and dataclasses for rwa-deployments library."""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from .constants import DEFAULT_OUTPUT

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def is_address(value: Any) -> bool:
    """Return True if value is a 0x-prefixed 20-byte hex string."""
    return isinstance(value, str) and bool(_ADDRESS_RE.match(value))


@dataclass(frozen=True)
class Literal:
    """A constructor argument whose value is known at declaration time."""

    value: Union[str, int, bool]

    @property
    def is_address(self) -> bool:
        return is_address(self.value)


@dataclass(frozen=True)
class ModuleOutputReference:
    """A constructor argument bound to another module's deployed output."""

    module_id: str
    output_name: str = DEFAULT_OUTPUT


ConstructorArgument = Union[Literal, ModuleOutputReference]


def as_argument(value: Any) -> ConstructorArgument:
    """Wrap a plain Python value as a Literal; pass arguments through."""
    if isinstance(value, (Literal, ModuleOutputReference)):
        return value
    if isinstance(value, (str, int, bool)):
        return Literal(value)
    raise TypeError(f"Unsupported constructor argument: {value!r}")


@dataclass(frozen=True)
class DeploymentModule:
    """One contract deployment and its ordered constructor arguments."""

    id: str  # e.g., "SaleEscrowModule"
    contract_name: str  # e.g., "SaleEscrow"
    args: Tuple[ConstructorArgument, ...] = ()
    output_name: str = DEFAULT_OUTPUT  # Name other modules reference this deployment by

    def __post_init__(self) -> None:
        # Plain values become Literal; anything else is rejected here, not at render time
        object.__setattr__(self, "args", tuple(as_argument(arg) for arg in self.args))

    @property
    def dependencies(self) -> List[str]:
        """Referenced module ids in argument order, without repeats."""
        seen: List[str] = []
        for arg in self.args:
            if isinstance(arg, ModuleOutputReference) and arg.module_id not in seen:
                seen.append(arg.module_id)
        return seen


@dataclass(frozen=True)
class ResolvedStep:
    """A module placed in deployment order."""

    module_id: str
    contract_name: str
    args: Tuple[ConstructorArgument, ...]
    output_name: str = DEFAULT_OUTPUT


@dataclass(frozen=True)
class ResolvedPlan:
    """Dependency-ordered sequence of steps."""

    steps: Tuple[ResolvedStep, ...]

    @property
    def module_ids(self) -> List[str]:
        return [step.module_id for step in self.steps]

    def __len__(self) -> int:
        return len(self.steps)


@dataclass(frozen=True)
class PendingAddress:
    """Placeholder for an address that exists only once its module is deployed."""

    module_id: str
    output_name: str = DEFAULT_OUTPUT

    @property
    def key(self) -> Tuple[str, str]:
        return (self.module_id, self.output_name)

    def __str__(self) -> str:
        return f"{self.module_id}#{self.output_name}"


OperationArgument = Union[str, int, bool, PendingAddress]


@dataclass(frozen=True)
class DeploymentOperation:
    """A single contract-creation operation for the external executor."""

    index: int  # Position in the plan, starting at 0
    network: str  # e.g., "sepolia"
    chain_id: int
    module_id: str
    contract_name: str
    args: Tuple[OperationArgument, ...]
    output_name: str = DEFAULT_OUTPUT

    @property
    def pending(self) -> List[PendingAddress]:
        """Placeholders still waiting for a deployed address."""
        return [arg for arg in self.args if isinstance(arg, PendingAddress)]

    @property
    def is_bound(self) -> bool:
        return not self.pending

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "index": self.index,
            "network": self.network,
            "chain_id": self.chain_id,
            "module_id": self.module_id,
            "contract_name": self.contract_name,
            "output_name": self.output_name,
            "args": [
                {"pending": str(arg)} if isinstance(arg, PendingAddress) else arg
                for arg in self.args
            ],
        }


@dataclass(frozen=True)
class NetworkProfile:
    """Endpoint and credentials for one target network."""

    # Required fields
    name: str  # e.g., "sepolia"
    chain_id: int
    url: str = field(repr=False)  # RPC endpoint with the API key filled in
    account: str = field(repr=False)  # Deployer private key

    # Optional fields
    explorer_api_key: Optional[str] = field(default=None, repr=False)
    block_explorer_url: Optional[str] = None
    chain_name: Optional[str] = None
