from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ByteOrder = Literal["little", "big", "native"]
Interpolation = Literal["auto", "nearest", "linear", "cubic", "area"]


class Settings(BaseSettings):
    """Library settings loaded from NINEPATCH_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NINEPATCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Density settings
    default_density: int = Field(default=160, gt=0, description="Density assumed for decoded images")
    target_density: Optional[int] = Field(
        default=None, gt=0, description="Density raw images are rescaled to (None = keep source density)"
    )

    # Binary format
    byte_order: ByteOrder = Field(
        default="little", description="Byte order of serialized chunks ('native' is not portable)"
    )

    # Rescaling
    interpolation: Interpolation = Field(
        default="auto", description="Resampling filter used when rescaling content pixels"
    )


settings = Settings()
