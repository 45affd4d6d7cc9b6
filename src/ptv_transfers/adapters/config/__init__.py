"""Configuration adapters."""

from ptv_transfers.adapters.config.app_config import AppConfig
from ptv_transfers.adapters.config.transfer_network_loader import (
    TransferNetworkLoader,
    default_network,
)

__all__ = ["AppConfig", "TransferNetworkLoader", "default_network"]
