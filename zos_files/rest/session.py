"""Connection details for a z/OSMF host."""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field


class ZosmfSession(BaseModel):
    """Connection and credential context for z/OSMF requests.

    Operations pass the session through to the REST client untouched.

    Example:
        >>> session = ZosmfSession(hostname="mainframe.example.com", user="ibmuser", password="secret")
        >>> session.base_url
        'https://mainframe.example.com:443'
    """

    model_config = ConfigDict(frozen=True)

    hostname: str = Field(description="z/OSMF host name")
    port: int = Field(default=443, description="z/OSMF port")
    protocol: str = Field(default="https", description="http or https")
    user: str | None = Field(default=None, description="User for basic authentication")
    password: str | None = Field(default=None, description="Password for basic authentication", repr=False)
    base_path: str = Field(default="", description="Path prefix, e.g. when behind an API mediation layer")
    reject_unauthorized: bool = Field(default=True, description="Verify the server certificate")
    timeout: float = Field(default=30.0, description="Request timeout in seconds")

    @property
    def base_url(self) -> str:
        """Scheme, host, port and base path of the z/OSMF service."""
        base_path = self.base_path.rstrip("/")
        if base_path and not base_path.startswith("/"):
            base_path = f"/{base_path}"
        return f"{self.protocol}://{self.hostname}:{self.port}{base_path}"
