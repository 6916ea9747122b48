"""Domain models for answer file build configuration and results."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_TEMPLATE = Path("autounattend_template.xml")
DEFAULT_MAPPING = Path("file_mapping.csv")
DEFAULT_OUTPUT = Path("autounattend.xml")


class MappingRow(BaseModel):
    """A single script to embed: local origin and in-image destination."""

    model_config = ConfigDict(frozen=True)

    source_path: Path = Field(..., description="Local path of the script")
    destination_path: str = Field(
        ..., description="Path the script is written to during setup"
    )


class BuildConfig(BaseModel):
    """Configuration for a single build."""

    template_path: Path = Field(
        default=DEFAULT_TEMPLATE, description="Answer file template"
    )
    mapping_path: Path = Field(default=DEFAULT_MAPPING, description="CSV file mapping")
    output_path: Path = Field(default=DEFAULT_OUTPUT, description="Generated answer file")
    file_mode: int = Field(default=0o644, description="File permissions (octal)")


class BuildResult(BaseModel):
    """Outcome of a build."""

    output_path: Path = Field(..., description="Written answer file")
    written: list[str] = Field(
        default_factory=list, description="Destinations embedded, in order"
    )
    skipped: list[MappingRow] = Field(
        default_factory=list, description="Rows whose source file was missing"
    )
