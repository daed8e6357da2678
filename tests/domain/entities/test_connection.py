import dataclasses

import pytest

from irmc_connector.config.settings import Settings
from irmc_connector.domain.entities.connection import ConnectionConfig


class TestConnectionConfig:
    def test_headers_use_basic_scheme_and_json(self):
        config = ConnectionConfig(token="abc123")

        assert config.headers() == {
            "Authorization": "Basic abc123",
            "Accept": "application/json",
        }

    def test_default_timeout(self):
        assert ConnectionConfig(token="abc123").timeout == Settings.Server.TIMEOUT

    def test_is_immutable(self):
        config = ConnectionConfig(token="abc123")

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.token = "other"

    def test_token_passed_through_untouched(self):
        # not validated, not re-encoded
        config = ConnectionConfig(token="not base64 at all!")

        assert config.headers()["Authorization"] == "Basic not base64 at all!"
