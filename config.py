"""Configuration for the mutation probe"""
from pathlib import Path
from typing import List, Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Probe configuration with Pydantic validation, read from PROBE_* variables"""

    model_config = SettingsConfigDict(env_prefix="PROBE_", case_sensitive=False)

    # Probe behaviour
    verify_original: bool = Field(default=True, description="Compare the original container before and after probing")
    type_error_is_unsupported: bool = Field(default=True, description="Treat TypeError as the unsupported-operation signal")
    disabled_operations_str: str = Field(default="", description="Operations to skip (comma-separated)")

    # Caller-side guard
    warn_on_mutable: bool = Field(default=True, description="Warn when an assertion subject is mutable")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Log file path (console only when unset)")

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case"""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator('log_file')
    @classmethod
    def ensure_log_directory(cls, v):
        """Ensure the parent directory of the log file exists"""
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    @property
    def disabled_operations(self) -> List[str]:
        """Get disabled operation names as a list"""
        return [item.strip() for item in self.disabled_operations_str.split(',') if item.strip()]

