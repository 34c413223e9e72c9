"""
Configuration schema for the stacked chart editor.

All tunables (palette, default labels, chart geometry, export layout and
server settings) live in a single EditorConfig object, which is exportable
to JSON so a session can be started with the same look every time.
"""

from typing import List
import json

from pydantic import BaseModel, Field

PYDANTIC_V2 = hasattr(BaseModel, "model_dump")

# Non-empty list constraint, spelled per pydantic major version
_NON_EMPTY = {"min_length": 1} if PYDANTIC_V2 else {"min_items": 1}


class DatasetConfig(BaseModel):
    """Naming and coloring of series and categories created in the editor."""

    palette: List[str] = Field(
        default=[
            "#FF6B6B", "#4ECDC4", "#45B7D1", "#FFA07A", "#98D8C8",
            "#F7DC6F", "#BB8FCE", "#85C1E2", "#F8B739", "#52B788",
        ],
        **_NON_EMPTY,
    )
    series_name_template: str = "Organism {n}"
    category_label_template: str = "Category {n}"

    class Config:
        extra = "allow"


class ChartConfig(BaseModel):
    """On-screen chart configuration."""

    default_kind: str = "bar"
    default_title: str = "Microorganism Distribution"
    default_y_label: str = "Percent of Total Isolates (%)"
    width: int = 900
    height: int = 500
    value_suffix: str = "%"
    fill_opacity: float = 0.8

    class Config:
        extra = "allow"


class ExportConfig(BaseModel):
    """Raster export configuration for chart and legend images."""

    scale: int = 2
    base_dpi: int = 100
    chart_background: str = "#f9fafb"
    legend_width: int = 300
    legend_row_height: int = 35
    legend_margin: int = 80
    legend_swatch_size: int = 24
    legend_title: str = "Legend"
    legend_background: str = "#ffffff"
    legend_border: str = "#d1d5db"
    legend_title_color: str = "#1f2937"
    legend_text_color: str = "#374151"

    class Config:
        extra = "allow"


class ServerConfig(BaseModel):
    """Dash development server configuration."""

    host: str = "127.0.0.1"
    port: int = 8050
    debug: bool = False

    class Config:
        extra = "allow"


class EditorConfig(BaseModel):
    """Complete editor configuration."""

    dataset: DatasetConfig = Field(default_factory=DatasetConfig)
    chart: ChartConfig = Field(default_factory=ChartConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)

    class Config:
        extra = "allow"

    def to_json(self) -> str:
        """Export configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def to_dict(self) -> dict:
        """Export configuration to dictionary."""
        if PYDANTIC_V2:
            return self.model_dump()
        else:
            return self.dict()

    @classmethod
    def from_json(cls, json_str: str) -> "EditorConfig":
        """Load configuration from JSON string."""
        data = json.loads(json_str)
        return cls(**data)

    @classmethod
    def from_file(cls, path: str) -> "EditorConfig":
        """Load configuration from JSON file."""
        with open(path, "r") as f:
            return cls.from_json(f.read())

    def save(self, path: str) -> None:
        """Save configuration to JSON file."""
        with open(path, "w") as f:
            f.write(self.to_json())


def get_default_config() -> EditorConfig:
    """Get default editor configuration."""
    return EditorConfig()
