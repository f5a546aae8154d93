"""Configuration management for the grammar-check pipeline."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class InputConfig(BaseModel):
    """Configuration for reading input records."""

    format: Literal["jsonl", "txt"] = "jsonl"
    text_fields: list[str] = Field(
        default_factory=lambda: ["text", "content"],
        min_length=1,
        description="Record keys tried in order; the first non-empty value is checked",
    )
    id_field: str = "file_id"


class GrammarConfig(BaseModel):
    """Configuration for the grammar rule table."""

    rule_set: Literal["basic", "extended"] = "extended"


class OutputConfig(BaseModel):
    """Configuration for output options."""

    output_dir: Path = Path("data/checked_output")
    save_full_files: bool = True     # One CSV with every checked word
    save_single_lines: bool = False  # One CSV per input record
    include_spaces: bool = True
    errors_only: bool = False


class Config(BaseModel):
    """Main configuration for the grammar-check pipeline."""

    input_file: Optional[Path] = None
    input: InputConfig = Field(default_factory=InputConfig)
    grammar: GrammarConfig = Field(default_factory=GrammarConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    workers: int = Field(default=1, ge=1)

    @field_validator("input_file", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
