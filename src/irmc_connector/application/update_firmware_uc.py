from irmc_connector.application.redfish_url import build_base_url
from irmc_connector.config.settings import Settings
from irmc_connector.domain.interfaces.i_irmc_api import IIrmcApi
from irmc_connector.utils.logger import setup_logger

logger = setup_logger(__name__)


class UpdateFirmwareUseCase:
    """Upload an iRMC firmware image. Returns the location of the update task."""

    def __init__(self, api: IIrmcApi, host: str):
        self.api = api
        self.base_url = build_base_url(host)

    async def execute(self, image_path: str) -> str:
        task_location = await self.api.post_file(
            self.base_url + Settings.Redfish.FIRMWARE_UPDATE, image_path
        )
        logger.info(f"Firmware update queued, task at {task_location}")
        return task_location
