from dataclasses import dataclass
from typing import Optional

import httpx

from irmc_connector.application.get_system_uc import GetSystemUseCase
from irmc_connector.application.reboot_manager_uc import RebootManagerUseCase
from irmc_connector.application.update_firmware_uc import UpdateFirmwareUseCase
from irmc_connector.config.settings import Settings
from irmc_connector.infra.http_client import IrmcApiConnector
from irmc_connector.utils.logger import configure_logging, setup_logger

logger = setup_logger(__name__)


@dataclass
class AppContext:
    connector: IrmcApiConnector
    get_system_uc: GetSystemUseCase
    update_firmware_uc: UpdateFirmwareUseCase
    reboot_manager_uc: RebootManagerUseCase

    async def close(self) -> None:
        await self.connector.aclose()


def build_app(
    host: str,
    token: str,
    timeout: float = Settings.Server.TIMEOUT,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AppContext:
    configure_logging()
    connector = IrmcApiConnector(token, timeout=timeout, transport=transport)
    logger.info(f"Connector for {host} ready")

    return AppContext(
        connector=connector,
        get_system_uc=GetSystemUseCase(connector, host),
        update_firmware_uc=UpdateFirmwareUseCase(connector, host),
        reboot_manager_uc=RebootManagerUseCase(connector, host),
    )
