"""Settings model for z/OSMF connections.

Contract:
- Inputs: Environment variables, YAML values
- Outputs: Validated settings objects and sessions built from them
- Side Effects: None (read-only)
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict

from zos_files.rest.session import ZosmfSession


class ZosmfSettings(BaseSettings):
    """Connection settings for the z/OSMF host.

    Attributes:
        host: z/OSMF host name (default: localhost)
        port: z/OSMF port (default: 443)
        protocol: http or https (default: https)
        user: User for basic authentication
        password: Password for basic authentication
        base_path: Path prefix in front of /zosmf
        reject_unauthorized: Verify the server certificate (default: True)
        timeout: Request timeout in seconds (default: 30)
        log_level: Logging level (default: info)

    Example:
        >>> settings = ZosmfSettings()
        >>> assert settings.port == 443
    """

    model_config = SettingsConfigDict(
        env_prefix="ZOWE_OPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "localhost"
    port: int = 443
    protocol: str = "https"
    user: str | None = None
    password: str | None = None
    base_path: str = ""
    reject_unauthorized: bool = True
    timeout: float = 30.0

    log_level: str = "info"

    @field_validator("protocol")
    @classmethod
    def check_protocol(cls, v: str) -> str:
        """Accept only http and https, case-insensitively."""
        protocol = v.lower()
        if protocol not in ("http", "https"):
            raise ValueError(f"Unsupported protocol: {v} (expected http or https)")
        return protocol

    def to_session(self) -> ZosmfSession:
        """Build a session from these settings."""
        return ZosmfSession(
            hostname=self.host,
            port=self.port,
            protocol=self.protocol,
            user=self.user,
            password=self.password,
            base_path=self.base_path,
            reject_unauthorized=self.reject_unauthorized,
            timeout=self.timeout,
        )
