from dataclasses import dataclass, field
from typing import Dict

from irmc_connector.config.settings import Settings


@dataclass(frozen=True)
class ConnectionConfig:
    token: str = field(repr=False)  # pre-encoded base64 "user:password"
    timeout: float = Settings.Server.TIMEOUT

    def headers(self) -> Dict[str, str]:
        """
        Headers sent with every request of a connector
        """
        return {
            "Authorization": f"{Settings.Server.AUTH_SCHEME} {self.token}",
            "Accept": Settings.Server.ACCEPT_HEADER,
        }
