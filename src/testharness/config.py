"""Configuration management for testharness."""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator


CONFIG_NAMES = ["testharness.json", ".testharness.json"]


class ProjectConfig(BaseModel):
    """Project identification."""

    name: str = Field(default="tests", description="Name shown in the run banner")


class RunConfig(BaseModel):
    """Test execution configuration."""

    catch_exceptions: bool = Field(
        default=True,
        description="Record a raising test body as UNKNOWN instead of aborting the run",
    )
    verbose: bool = Field(default=False, description="Echo messages passed to the logger")


class ConsoleConfig(BaseModel):
    """Console output configuration."""

    color: bool = Field(default=True, description="Use colored output")
    width: Optional[int] = Field(default=None, description="Fixed console width (auto-detect when unset)")

    @field_validator("width")
    @classmethod
    def validate_width(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 40:
            raise ValueError("Console width must be at least 40 columns")
        return v


class HarnessConfig(BaseModel):
    """Main configuration for testharness."""

    project: ProjectConfig = Field(default_factory=ProjectConfig)
    run: RunConfig = Field(default_factory=RunConfig)
    console: ConsoleConfig = Field(default_factory=ConsoleConfig)
    suites: list[str] = Field(
        default_factory=list,
        description="Import paths (module:attr) of the suites to run, in order",
    )

    @field_validator("suites")
    @classmethod
    def validate_suites(cls, v: list[str]) -> list[str]:
        for path in v:
            if not path.strip():
                raise ValueError("Suite import path cannot be empty")
        return v

    @classmethod
    def from_file(cls, path: Path | str) -> "HarnessConfig":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, "r") as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def find(cls, start_dir: Path | str | None = None) -> Optional[Path]:
        """Search up the directory tree for a configuration file."""
        if start_dir is None:
            start_dir = Path.cwd()
        else:
            start_dir = Path(start_dir)

        current = start_dir.resolve()
        while True:
            for name in CONFIG_NAMES:
                config_path = current / name
                if config_path.exists():
                    return config_path
            if current == current.parent:
                return None
            current = current.parent

    @classmethod
    def find_and_load(cls, start_dir: Path | str | None = None) -> "HarnessConfig":
        """Find and load configuration file, searching up the directory tree."""
        config_path = cls.find(start_dir)
        if config_path is None:
            raise FileNotFoundError(
                "No configuration file found. Create testharness.json or run 'testharness init'"
            )
        return cls.from_file(config_path)

    def to_file(self, path: Path | str) -> None:
        """Save configuration to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)


def get_default_config() -> HarnessConfig:
    """Return a default configuration."""
    return HarnessConfig()


def create_example_config(output_path: Path | str) -> Path:
    """Create an example configuration file."""
    output_path = Path(output_path)
    config = get_default_config()
    config.project.name = "my-project"
    config.suites = ["my_project.checks:SmokeSuite"]
    config.to_file(output_path)
    return output_path
