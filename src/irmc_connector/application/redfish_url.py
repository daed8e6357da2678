from irmc_connector.config.settings import Settings


def build_base_url(host: str) -> str:
    """
    "irmc01" -> "https://irmc01". A host that already carries a scheme is kept.
    """
    host = host.strip().rstrip("/")
    if not host:
        raise ValueError("Host cannot be empty")

    if "://" in host:
        return host
    return f"{Settings.Redfish.SCHEME}://{host}"
