"""
Driver configuration
"""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Driver settings (environment or ``.env``)"""

    # .env belongs to whatever project chroma runs in; unrelated keys are ignored
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Toolchain
    CHROMA_COMPILER: str = "g++"

    # Layout (relative to the project root)
    CHROMA_BUILD_DIR: str = "build"
    CHROMA_MANIFEST: str = "chroma.toml"


settings = Settings()
