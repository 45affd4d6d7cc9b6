"""Main entry point for the PTV transfers web server."""

import asyncio
import logging
import sys

import aiohttp
import uvicorn

from ptv_transfers.adapters.config import AppConfig, TransferNetworkLoader
from ptv_transfers.adapters.ptv_api import PtvDepartureRepository
from ptv_transfers.adapters.web import create_app
from ptv_transfers.application.services import TransferRecommendationService
from ptv_transfers.domain.errors import ConfigurationError
from ptv_transfers.domain.models import TransferNetwork

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


def load_network(config: AppConfig) -> TransferNetwork:
    """Load the transfer network, exiting on invalid configuration."""
    try:
        network = TransferNetworkLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid network configuration: {e}")
        sys.exit(1)

    logger.info(
        f"Loaded network to {network.destination_name}: {len(network.stations)} station(s), "
        f"{len(network.routes)} bus route option(s)"
    )
    return network


def build_service(
    config: AppConfig, network: TransferNetwork, session: aiohttp.ClientSession
) -> TransferRecommendationService:
    """Wire the PTV repository into the recommendation service.

    Raises:
        ConfigurationError: If PTV credentials are missing.
    """
    departure_repo = PtvDepartureRepository.from_config(config, session)
    return TransferRecommendationService(
        departure_repo,
        network,
        train_max_results=config.train_max_results,
        bus_max_results=config.bus_max_results,
    )


async def main(config: AppConfig | None = None) -> None:
    """Main application entry point."""
    config = config or AppConfig()
    network = load_network(config)

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        service: TransferRecommendationService | None
        try:
            service = build_service(config, network, session)
        except ConfigurationError as e:
            # Keep serving the front end; the API reports the problem
            logger.error(str(e))
            service = None

        app = create_app(service, config)
        server = uvicorn.Server(
            uvicorn.Config(app, host=config.host, port=config.port, log_level="info")
        )
        logger.info(f"Server running at http://{config.host}:{config.port}")
        try:
            await server.serve()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            server.should_exit = True


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
