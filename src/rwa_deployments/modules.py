"""The RWA sale project's deployment modules."""

from typing import List

from .builder import ModuleBuilder, reference
from .constants import KYC_ADDRESS, SALE_ESCROW_ADDRESS, USDT_ADDRESS
from .types import DeploymentModule


def declare_project_modules(
    builder: ModuleBuilder, live_escrow: bool = False
) -> List[DeploymentModule]:
    """
    Declare the factory, escrow and marketplace modules.

    Args:
        builder: Builder to declare into
        live_escrow: Wire the marketplace to the escrow deployed in this run
                     instead of the pinned SALE_ESCROW_ADDRESS

    Returns:
        The three declared modules
    """
    factory = builder.declare_module(
        "RWATokenFactoryModule", "RWATokenFactory", [KYC_ADDRESS], output_name="factory"
    )
    escrow = builder.declare_module(
        "SaleEscrowModule", "SaleEscrow", [USDT_ADDRESS, KYC_ADDRESS], output_name="escrow"
    )

    if live_escrow:
        escrow_arg = reference("SaleEscrowModule", "escrow")
    else:
        escrow_arg = SALE_ESCROW_ADDRESS

    sale = builder.declare_module(
        "SaleMarketplaceModule",
        "SaleMarketplace",
        [USDT_ADDRESS, KYC_ADDRESS, escrow_arg],
        output_name="sale",
    )
    return [factory, escrow, sale]
