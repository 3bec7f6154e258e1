from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from pathlib import Path
from typing import Optional


ASSETS_DIR = Path(__file__).resolve().parent / "generation" / "assets"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API Keys
    google_api_key: Optional[str] = Field(default=None)

    # Model Selection
    chart_model: str = "gemini-2.5-pro"

    # Default answer for the chart directory prompt
    chart_default_directory: str = "./chart"

    # Bundled assets
    chart_prompt_path: Path = ASSETS_DIR / "chart_prompt.md"
    chart_reference_audio_path: Path = ASSETS_DIR / "example.mp3"

    # Logging
    log_file: Path = Path("maichart.log")
    log_level: str = "INFO"
    log_to_console: bool = False

    @property
    def env_api_key(self) -> Optional[str]:
        """Credential from the environment, treating blank values as unset"""
        if self.google_api_key and self.google_api_key.strip():
            return self.google_api_key
        return None


# Initialize settings
settings = Settings()
