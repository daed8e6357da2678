from irmc_connector.application.redfish_url import build_base_url
from irmc_connector.config.settings import Settings
from irmc_connector.domain.interfaces.i_irmc_api import IIrmcApi


class RebootManagerUseCase:
    def __init__(self, api: IIrmcApi, host: str):
        self.api = api
        self.base_url = build_base_url(host)

    async def execute(self) -> str:
        return await self.api.post_action(
            self.base_url + Settings.Redfish.MANAGER_RESET
        )
