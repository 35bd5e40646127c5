"""Module descriptor parsers for rwa-deployments library."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .builder import ModuleBuilder
from .constants import DEFAULT_OUTPUT
from .exceptions import DescriptorError
from .types import ConstructorArgument, DeploymentModule, Literal, ModuleOutputReference

logger = logging.getLogger(__name__)


def parse_argument(raw: Any) -> ConstructorArgument:
    """
    Parse one constructor argument from its JSON form.

    JSON scalars (string, integer, boolean) are literals; an object of the
    form {"module": "<id>", "output": "<name>"} references another module.
    "output" defaults to "address".

    Raises:
        DescriptorError: If raw is neither form
    """
    if isinstance(raw, dict):
        if "module" not in raw:
            raise DescriptorError(f"Reference argument missing 'module': {raw!r}")
        unexpected = set(raw) - {"module", "output"}
        if unexpected:
            raise DescriptorError(f"Unexpected keys in reference argument: {sorted(unexpected)}")
        return ModuleOutputReference(
            module_id=raw["module"], output_name=raw.get("output", DEFAULT_OUTPUT)
        )

    # JSON floats and nulls have no constructor-argument meaning
    if isinstance(raw, (str, int, bool)):
        return Literal(raw)

    raise DescriptorError(f"Unsupported argument value: {raw!r}")


def parse_module_descriptor(data: Dict[str, Any]) -> DeploymentModule:
    """
    Parse a module descriptor.

    Args:
        data: Dictionary with keys:
            - Required: id, contract
            - Optional: args (list, defaults to []), output (defaults to "address")

    Returns:
        DeploymentModule

    Raises:
        DescriptorError: If required keys are missing or have the wrong type
    """
    if not isinstance(data, dict):
        raise DescriptorError(f"Module descriptor must be an object, got {type(data).__name__}")

    for key in ("id", "contract"):
        if not isinstance(data.get(key), str) or not data[key]:
            raise DescriptorError(f"Module descriptor requires a non-empty string '{key}'")

    raw_args = data.get("args", [])
    if not isinstance(raw_args, list):
        raise DescriptorError(f"'args' of module '{data['id']}' must be a list")

    if not isinstance(data.get("output", DEFAULT_OUTPUT), str):
        raise DescriptorError(f"'output' of module '{data['id']}' must be a string")

    return DeploymentModule(
        id=data["id"],
        contract_name=data["contract"],
        args=tuple(parse_argument(arg) for arg in raw_args),
        output_name=data.get("output", DEFAULT_OUTPUT),
    )


def load_module_file(file_path: Union[Path, str]) -> DeploymentModule:
    """
    Load a module descriptor JSON file.

    Raises:
        DescriptorError: If the file cannot be read, is not valid JSON, or is
            not a valid descriptor
    """
    file_path = Path(file_path)
    try:
        with open(file_path) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise DescriptorError(f"Invalid JSON in module file {file_path}: {e}") from e
    except OSError as e:
        raise DescriptorError(f"Cannot read module file {file_path}: {e}") from e

    return parse_module_descriptor(data)


def load_modules_from_dir(
    modules_dir: Union[Path, str], builder: Optional[ModuleBuilder] = None
) -> List[DeploymentModule]:
    """
    Load every *.json descriptor in a directory.

    Files are read in sorted name order, which becomes the declaration order.

    Args:
        modules_dir: Directory of descriptor files
        builder: Builder to register modules with (a new one if None)

    Returns:
        All modules registered with the builder, in declaration order

    Raises:
        DescriptorError: If modules_dir is not a directory or a file is malformed
        DuplicateModuleError: If two files declare the same id
    """
    modules_dir = Path(modules_dir)
    if not modules_dir.is_dir():
        raise DescriptorError(f"Module directory not found: {modules_dir}")

    if builder is None:
        builder = ModuleBuilder()

    for module_file in sorted(modules_dir.glob("*.json")):
        module = load_module_file(module_file)
        logger.debug("Loaded module %s from %s", module.id, module_file.name)
        builder.add(module)

    return builder.modules()
