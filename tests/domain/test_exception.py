from irmc_connector.domain.exception import (
    FileAccessError,
    HttpStatusError,
    IrmcError,
    MissingLocationHeader,
    TransportError,
)


class TestErrorTaxonomy:
    def test_all_errors_share_base(self):
        for exc in (
            TransportError("down"),
            HttpStatusError(500, "Internal Server Error"),
            FileAccessError("/tmp/x.BIN"),
            MissingLocationHeader("https://irmc/upload", 202),
        ):
            assert isinstance(exc, IrmcError)

    def test_http_status_error_message(self):
        exc = HttpStatusError(404, "Not Found", "https://irmc/redfish/v1/Systems/9")

        assert str(exc) == "HTTP 404 Not Found for https://irmc/redfish/v1/Systems/9"

    def test_http_status_error_message_without_url(self):
        assert str(HttpStatusError(401, "Unauthorized")) == "HTTP 401 Unauthorized"

    def test_file_access_error_keeps_path(self):
        exc = FileAccessError("/fw/update.BIN", "No such file or directory")

        assert exc.path == "/fw/update.BIN"
        assert "No such file or directory" in str(exc)
