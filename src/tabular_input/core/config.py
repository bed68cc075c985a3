"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Widget settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="TABULAR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Buttons
    add_button_class: str = Field(default="btn btn-default", description="Add button CSS class")
    add_button_label: str = Field(
        default='<i class="glyphicon glyphicon-plus"></i>', description="Add button label markup"
    )
    remove_button_class: str = Field(
        default="btn btn-danger", description="Remove button CSS class"
    )
    remove_button_label: str = Field(
        default='<i class="glyphicon glyphicon-remove"></i>',
        description="Remove button label markup",
    )

    # Client
    index_placeholder_prefix: str = Field(
        default="multiple_index_", min_length=1, description="Row index placeholder prefix"
    )
    client_plugin: str = Field(
        default="multipleInput", min_length=1, description="jQuery plugin invoked by bootstrap"
    )

    # Payload limits
    max_payload_size: int = Field(default=512 * 1024, gt=0, description="Max payload size (bytes)")
    max_payload_depth: int = Field(default=20, gt=0, description="Max payload nesting depth")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
