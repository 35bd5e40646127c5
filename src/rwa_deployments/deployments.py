"""Main API for rwa-deployments library."""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from .config import ProjectConfig, load_environment, load_network_profile
from .parsers import load_modules_from_dir
from .paths import get_default_modules_dir, get_plan_path
from .render import render
from .resolver import resolve
from .types import DeploymentModule, DeploymentOperation, NetworkProfile, ResolvedPlan

logger = logging.getLogger(__name__)


class DeploymentPlanner:
    """Plans contract deployments for a fixed set of modules."""

    def __init__(
        self,
        modules: Iterable[DeploymentModule],
        project: Optional[ProjectConfig] = None,
    ):
        """
        Initialize the planner.

        The modules are resolved immediately, so an invalid module set fails
        here before any network is involved.

        Args:
            modules: Modules in declaration order
            project: Compiler and layout settings (defaults to ProjectConfig())

        Raises:
            DuplicateModuleError: If two modules share an id
            UnknownModuleReferenceError: If a reference names an absent module
            CyclicDependencyError: If references form a cycle
        """
        self._modules = list(modules)
        self._project = project or ProjectConfig()
        self._plan = resolve(self._modules)

    def plan(self) -> ResolvedPlan:
        return self._plan

    def module_ids(self) -> List[str]:
        """Module ids in deployment order."""
        return self._plan.module_ids

    def operations(self, network: NetworkProfile) -> List[DeploymentOperation]:
        """
        Render the plan for a network.

        Args:
            network: Target network profile

        Returns:
            Operations in deployment order
        """
        return render(self._plan, network)

    def to_dict(self, network: NetworkProfile) -> Dict[str, Any]:
        """
        Serialize the rendered plan with its metadata.

        Credentials are never included.
        """
        return {
            "metadata": {
                "generated_at": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
                "network": network.name,
                "chain_id": network.chain_id,
                "solidity_version": self._project.solidity_version,
                "sources_dir": self._project.sources_dir,
            },
            "operations": [op.to_dict() for op in self.operations(network)],
        }

    def write_plan(
        self,
        network: NetworkProfile,
        output_path: Optional[Union[Path, str]] = None,
    ) -> str:
        """
        Write the rendered plan to disk as JSON.

        Args:
            network: Target network profile
            output_path: Where to save the plan
                        (defaults to ./ignition/deployments/<network>/plan.json)

        Returns:
            Path where the plan was saved
        """
        if output_path is None:
            output_path = get_plan_path(network.name)

        output_path_obj = Path(output_path)
        output_path_obj.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path_obj, "w") as f:
            json.dump(self.to_dict(network), f, indent=2)

        logger.info(
            "Wrote %d operations for %s to %s", len(self._plan), network.name, output_path_obj
        )
        return str(output_path_obj)


def plan_from_directory(
    network_name: str,
    modules_dir: Optional[Union[Path, str]] = None,
    dotenv_path: Optional[Union[Path, str]] = None,
    project: Optional[ProjectConfig] = None,
) -> List[DeploymentOperation]:
    """
    Load descriptors, read configuration and render the plan in one call.

    Configuration is validated before descriptors are read, so a missing
    credential is reported even when the modules are fine.

    Args:
        network_name: Network name ("sepolia" or "mainnet")
        modules_dir: Descriptor directory (defaults to ./ignition/modules)
        dotenv_path: Path to .env file (defaults to ./.env)
        project: Compiler and layout settings

    Returns:
        Rendered operations in deployment order

    Raises:
        UnknownNetworkError: If network_name is not configured
        MissingConfigurationError: If required variables are unset
        DescriptorError: If a descriptor file is malformed
        DeploymentError: Any resolution error
    """
    profile = load_network_profile(network_name, load_environment(dotenv_path))

    if modules_dir is None:
        modules_dir = get_default_modules_dir()

    planner = DeploymentPlanner(load_modules_from_dir(modules_dir), project)
    return planner.operations(profile)
