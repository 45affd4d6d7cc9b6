"""Adapters - infrastructure around the transfer recommendation core."""

from ptv_transfers.adapters.config import AppConfig, TransferNetworkLoader
from ptv_transfers.adapters.ptv_api import PtvDepartureRepository

__all__ = ["AppConfig", "PtvDepartureRepository", "TransferNetworkLoader"]
