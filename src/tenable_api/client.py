"""Tenable client holding credentials and the base URI."""

from tenable_api.config import DEFAULT_BASE_URL, Settings, get_settings
from tenable_api.endpoints.assets import AssetRequests


class Tenable(AssetRequests):
    """Tenable client which allows requests against the Tenable.io API.

    The client only produces endpoint objects. Sending them is done by the
    dispatch functions together with a transport supplied by the caller::

        tenable = Tenable(access_key, secret_key)
        with create_transport() as transport:
            assets = request(tenable.assets(), transport)
    """

    def __init__(self, access_key: str, secret_key: str, uri: str = DEFAULT_BASE_URL):
        """Create a client with the given credentials.

        Args:
            access_key: Tenable user access key.
            secret_key: Tenable user secret key.
            uri: Base URI all endpoint paths are appended to.
        """
        self.auth = f"accessKey={access_key};secretKey={secret_key}"
        self.uri = uri.rstrip("/")

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Tenable":
        """Create a client from application settings.

        Args:
            settings: Settings to use, defaults to the cached environment settings.

        Returns:
            Configured Tenable client.
        """
        settings = settings or get_settings()
        return cls(
            settings.tenable.access_key.get_secret_value(),
            settings.tenable.secret_key.get_secret_value(),
            settings.tenable.base_url,
        )

    def __repr__(self) -> str:
        return f"Tenable(uri={self.uri!r})"
