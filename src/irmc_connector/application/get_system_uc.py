import json
from typing import Any, Dict

from irmc_connector.application.redfish_url import build_base_url
from irmc_connector.config.settings import Settings
from irmc_connector.domain.interfaces.i_irmc_api import IIrmcApi


class GetSystemUseCase:
    def __init__(self, api: IIrmcApi, host: str):
        self.api = api
        self.base_url = build_base_url(host)

    async def execute(self, system_id: str = "0") -> Dict[str, Any]:
        path = Settings.Redfish.SYSTEM.format(system_id=system_id)
        body = await self.api.get(self.base_url + path)
        return json.loads(body)
