"""
Configuration for the unused translation key audit
"""

from typing import List

import psutil
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Audit settings, overridable through KEYAUDIT_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="KEYAUDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Basic configuration
    app_name: str = "keyaudit"
    version: str = "1.0.0"

    # Definition files: <marker_dir_name>/<definition_relpath>
    marker_dir_name: str = Field(default="translator")
    definition_relpath: str = Field(default="master/translation.en.json")
    plural_marker: str = Field(default="_plural")

    # Source files scanned for usages
    source_extensions: List[str] = Field(default=[".ts", ".tsx"])
    # Generated import aggregator, references every key by name
    excluded_filename: str = Field(default="translationImports.ts")

    # Report output
    all_keys_filename: str = Field(default="all_keys.json")
    unused_keys_filename: str = Field(default="unused_keys.json")

    # 0 means one worker per logical CPU
    workers: int = Field(default=0, ge=0)

    # Logging
    log_level: str = Field(default="WARNING")
    log_json: bool = Field(default=False)

    def resolved_workers(self) -> int:
        """Effective size of the scanner worker pool"""
        if self.workers > 0:
            return self.workers
        return psutil.cpu_count() or 1


# Global settings instance
settings = Settings()
