"""Application configuration."""
import os
from dataclasses import dataclass


@dataclass
class SortlyApiConfig:
    """Sortly API configuration."""

    base_url: str = "https://api.sortly.co"
    api_key: str = ""  # Read from env or prompt
    timeout: int = 60

    @classmethod
    def from_env(cls) -> "SortlyApiConfig":
        """Load config from environment variables."""
        return cls(
            base_url=os.getenv("SORTLY_API_URL", "https://api.sortly.co"),
            api_key=os.getenv("SORTLY_API_KEY", ""),
            timeout=int(os.getenv("SORTLY_TIMEOUT", "60")),
        )


@dataclass
class AppConfig:
    """Application configuration."""

    output_dir: str = "./output"
    sortly_api: SortlyApiConfig = None

    def __post_init__(self):
        """Initialize default values."""
        if self.sortly_api is None:
            self.sortly_api = SortlyApiConfig.from_env()

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load config from environment variables."""
        return cls(
            output_dir=os.getenv("SORTLY_OUTPUT_DIR", "./output"),
            sortly_api=SortlyApiConfig.from_env(),
        )


# Global instance
app_config = AppConfig()
