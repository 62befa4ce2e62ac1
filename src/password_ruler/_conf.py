from typing import Annotated, Any

import annotated_types
import lazy_object_proxy
import pydantic
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .exc import ConfigValidationError
from .util.model import convert_errors

__all__ = ("Settings", "load_settings", "settings")


class Settings(BaseSettings):
    """
    Engine defaults, read from ``PASSWORD_RULER_*`` environment variables.

    Attributes:
        default_length: Length of a generated password when none is requested.
        secure_random: Draw generated passwords from :class:`secrets.SystemRandom` when
            no random source is given. Turning this off falls back to
            :class:`random.Random`, which is only suitable for tests.
    """

    model_config = SettingsConfigDict(
        extra="forbid",
        env_prefix="PASSWORD_RULER_",
    )

    default_length: Annotated[int, annotated_types.Ge(1)] = 16
    secure_random: bool = True

    @classmethod
    def settings_customise_sources(
        cls,
        _: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return init_settings, env_settings


def load_settings(**overrides: Any) -> Settings:
    try:
        return Settings(**overrides)
    except pydantic.ValidationError as ex:
        raise ConfigValidationError(str(convert_errors(ex)), ctx=None) from ex


settings: Settings = lazy_object_proxy.Proxy(load_settings)  # type: ignore[assignment]
