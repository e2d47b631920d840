import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


BASE_DIR = Path(__file__).resolve().parent.parent  # mvc-render/


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a usable default so the renderer starts without a .env
    file. Values are read from MVC_RENDER_* environment variables.
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")
    log_level: str = Field(default="INFO", description="Root log level")

    # Static HTML pages: document_root / base_url / views_dir / <page>
    document_root: Path = Field(default=BASE_DIR, description="Document root of the site")
    base_url: str = Field(default="", description="Base URL of the application below the document root")
    views_dir: str = Field(default="src/Views", description="Directory holding static HTML views")

    # Jinja2 templates
    templates_dir: Path = Field(default=Path("src/Views"), description="Template search root")

    # Redirects
    script_name: str | None = Field(
        default=None,
        description="Path of the front controller used for relative redirects (default: request root path)",
    )

    # Dynamic views
    view_modules: list[str] = Field(
        default_factory=list,
        description="Modules exposing register_views(registry), imported at startup",
    )

    model_config = SettingsConfigDict(
        env_prefix="MVC_RENDER_",
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @property
    def views_root(self) -> Path:
        """Directory static HTML pages are served from."""
        return self.document_root / self.base_url / self.views_dir

    @property
    def templates_root(self) -> Path:
        """Template search root, relative paths anchored at the document root."""
        if self.templates_dir.is_absolute():
            return self.templates_dir
        return self.document_root / self.templates_dir

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got {v!r}")
        return v

    @field_validator("base_url", mode="after")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Strip slashes so base_url joins cleanly under document_root."""
        return v.strip().strip("/")


# Singleton settings instance
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
