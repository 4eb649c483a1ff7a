"""Run configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_MESSAGE_BUFFER_SIZE = 512


class RunConfig(BaseModel):
    """Configuration handed explicitly to a fixture runner.

    The engine never reads the environment; hosts build this object.
    """

    message_buffer_size: int = Field(
        default=DEFAULT_MESSAGE_BUFFER_SIZE,
        ge=2,
        description="Capacity of the failure message buffer, in characters",
    )
    tracing: bool = Field(default=False, description="Emit an OpenTelemetry span per fixture and test")


class MicrounitSettings(BaseSettings):
    """Settings for the command-line host.

    Loads from environment variables automatically:
        MICROUNIT_LOG_LEVEL, MICROUNIT_VERBOSITY, MICROUNIT_TRACE_OUTPUT,
        MICROUNIT_MESSAGE_BUFFER_SIZE
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="WARNING")
    verbosity: int = Field(default=0, description="-1 quiet, 0 normal, 1 verbose")
    trace_output: Path | None = Field(default=None, description="JSONL file for trace spans")
    message_buffer_size: int = Field(default=DEFAULT_MESSAGE_BUFFER_SIZE, ge=2)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="MICROUNIT_",
    )

    def run_config(self) -> RunConfig:
        """Build the engine configuration from these settings."""
        return RunConfig(
            message_buffer_size=self.message_buffer_size,
            tracing=self.trace_output is not None,
        )
