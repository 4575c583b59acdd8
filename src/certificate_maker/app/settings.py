from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    # flat = easy env overrides
    name: str = Field(default="Certificate Maker", validation_alias=AliasChoices("APP_NAME"))
    version: str = Field(default="0.1.0", validation_alias=AliasChoices("APP_VERSION"))
    host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("HOST", "APP_HOST"))
    port: int = Field(default=8080, validation_alias=AliasChoices("PORT", "APP_PORT"))
    allowed_origin: str = Field(
        default="*",
        validation_alias=AliasChoices("ALLOWED_ORIGIN", "APP_ALLOWED_ORIGIN"),
        description="Value sent in Access-Control-Allow-Origin",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_app_settings(**kwargs) -> AppSettings:
    # Only include kwargs that are not None, so defaults in AppSettings are used
    filtered_kwargs = {k: v for k, v in kwargs.items() if v is not None}
    return AppSettings(**filtered_kwargs)
