# System
import pathlib as pl

# Third Party
import pydantic as pc
import pydantic_settings as ps


class ColorSettings(ps.BaseSettings):
    """Package configuration, read from ``RGBHSL_*`` environment variables."""

    model_config = ps.SettingsConfigDict(
        env_prefix="RGBHSL_",
    )

    seed: int | None = pc.Field(
        default=None,
        description="Seed for the default random color generator. Unseeded if unset.",
    )

    @classmethod
    def from_toml(cls, toml_file: pl.Path | str, **kwargs) -> "ColorSettings":
        """Load settings from a TOML file; keyword arguments take precedence."""
        file_settings = ps.TomlConfigSettingsSource(cls, toml_file=pl.Path(toml_file))
        return cls(**{**file_settings(), **kwargs})
