"""
Hero API configuration settings.

Addressing of the hero collection resource and HTTP transport parameters.

Dependencies: pydantic, pydantic_settings
System role: Connection configuration for the HTTP hero store
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from herodesk.configs.base import BaseSettings


class HeroApiSettings(BaseSettings):
    """Hero collection endpoint configuration."""

    model_config = SettingsConfigDict(env_prefix="HERODESK_API_")

    base_url: str = Field(
        default="http://localhost:8000",
        description="Scheme and host the collection path is resolved against",
    )
    api_prefix: str = Field(default="api", description="Path prefix of the web API")
    collection: str = Field(default="heroes", description="Logical collection name")
    timeout_seconds: float = Field(default=10.0, description="HTTP transport timeout in seconds")

    @property
    def collection_url(self) -> str:
        """
        Construct the collection resource path.

        Returns:
            str: Relative resource path, e.g. ``api/heroes``
        """
        prefix = self.api_prefix.strip("/")
        collection = self.collection.strip("/")
        return f"{prefix}/{collection}" if prefix else collection
