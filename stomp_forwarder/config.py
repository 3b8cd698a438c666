"""Configuration management for the STOMP forwarder."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def split_address(address: str) -> tuple[str, int]:
    """Split a ``host:port`` address into its host and numeric port."""
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"address must be in host:port form, got {address!r}")
    return host, int(port)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        # Command line flags, only read when parsing is requested (see load_settings)
        cli_prog_name="stomp-forwarder",
        cli_kebab_case=True,
        cli_implicit_flags=True,
        cli_shortcuts={"listen-addr": "addr"},
    )

    # Server settings
    listen_addr: str = Field(default="0.0.0.0:80", description="Address on which to listen")
    debug: bool = Field(default=False, description="Debug mode")

    # STOMP broker
    stomp_addr: str = Field(default="localhost:61616", description="Address where the stomp server is listening")
    stomp_user: str = Field(default="admin", description="Username to authenticate in the stomp server")
    stomp_pass: str = Field(default="admin", description="Password to authenticate in the stomp server")

    @field_validator("listen_addr", "stomp_addr")
    @classmethod
    def validate_address(cls, v: str) -> str:
        split_address(v)
        return v

    @property
    def host(self) -> str:
        # ":9087" listens on every interface
        return split_address(self.listen_addr)[0] or "0.0.0.0"

    @property
    def port(self) -> int:
        return split_address(self.listen_addr)[1]

    @property
    def stomp_host_and_ports(self) -> list[tuple[str, int]]:
        return [split_address(self.stomp_addr)]

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.debug else "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()


def load_settings(args: list[str] | None = None) -> Settings:
    """Load settings from command line flags, falling back to env and defaults.

    ``args`` defaults to ``sys.argv[1:]``.
    """
    return Settings(_cli_parse_args=True if args is None else args)
