"""
Configuration module for dynaform.

Handles environment variables and default settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

ASSETS_DIR = Path(__file__).parent / "assets"


@dataclass
class DynaformConfig:
    """Configuration settings for dynaform."""

    # Form documents
    schema_path: str = str(ASSETS_DIR / "form_schema.json")
    ui_schema_path: str = str(ASSETS_DIR / "ui_schema.json")

    # Validation policy
    min_text_length: int = 3
    number_minimum: int = 18
    number_minimum_message: str = "Age must be 18 or older"

    # Output settings
    result_indent: int | None = 2
    log_level: str = "INFO"

    # MCP Server settings
    mcp_transport: str = "stdio"  # stdio or sse
    mcp_port: int = 8080

    @classmethod
    def from_env(cls) -> "DynaformConfig":
        """
        Create configuration from environment variables.

        If an environment variable is not set, uses the class field default value.
        """
        _defaults = cls()

        return cls(
            schema_path=os.getenv("DYNAFORM_SCHEMA_PATH", _defaults.schema_path),
            ui_schema_path=os.getenv("DYNAFORM_UI_SCHEMA_PATH", _defaults.ui_schema_path),
            min_text_length=int(os.getenv("DYNAFORM_MIN_TEXT_LENGTH", str(_defaults.min_text_length))),
            number_minimum=int(os.getenv("DYNAFORM_NUMBER_MINIMUM", str(_defaults.number_minimum))),
            number_minimum_message=os.getenv(
                "DYNAFORM_NUMBER_MINIMUM_MESSAGE", _defaults.number_minimum_message
            ),
            result_indent=int(os.getenv("DYNAFORM_RESULT_INDENT", str(_defaults.result_indent))),
            log_level=os.getenv("DYNAFORM_LOG_LEVEL", _defaults.log_level).upper(),
            mcp_transport=os.getenv("MCP_TRANSPORT", _defaults.mcp_transport),
            mcp_port=int(os.getenv("MCP_PORT", str(_defaults.mcp_port))),
        )


config = DynaformConfig.from_env()


def get_config() -> DynaformConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> DynaformConfig:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
    return config
