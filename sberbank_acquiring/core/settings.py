"""
Acquiring client settings using pydantic-settings v2 with nested env keys.

Values here are defaults only; options passed to the client win.
"""
from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


API_URI = "https://ecommerce.sberbank.ru"
API_URI_TEST = "https://ecomtest.sberbank.ru"
API_PREFIX_DEFAULT = "/ecomm/gw/partner/api/v1/"


class TransportTimeouts(BaseModel):
    connect: float = 5.0
    read: float = 30.0
    write: float = 30.0
    total: float = 60.0


class AcquiringSettings(BaseSettings):
    api_uri: str = API_URI
    prefix_default: str = API_PREFIX_DEFAULT
    # The gateway's certificate chain is not in common CA bundles
    verify_ssl: bool = False
    debug: bool = False
    timeouts: TransportTimeouts = Field(default_factory=TransportTimeouts)

    model_config = SettingsConfigDict(
        env_prefix="SBERBANK_",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )


acquiring_settings = AcquiringSettings()
