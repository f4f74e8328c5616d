from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field, ConfigDict
import yaml

class PathsConfig(BaseSettings):
    input_folder: Path = Field(default=Path("input_data/html"))
    output_dir: Path = Field(default=Path("output_data/views"))
    log_dir: Path = Field(default=Path("logs"))

    model_config = ConfigDict(arbitrary_types_allowed=True)

class ExtractionConfig(BaseSettings):
    parser: str = Field(default="html.parser")
    root_max_depth: int = Field(default=4)
    boundary_max_depth: int = Field(default=5)
    nested_max_depth: int = Field(default=6)
    min_pattern_count: int = Field(default=2)
    keyword_min_text: int = Field(default=10)
    meaningful_min_text: int = Field(default=20)
    meaningful_min_children: int = Field(default=2)
    format_partials: bool = Field(default=False)

class FilesConfig(BaseSettings):
    views_dir: str = Field(default="views")
    entry_template: str = Field(default="index")
    partials_dir: str = Field(default="partials")
    template_extension: str = Field(default=".ejs")
    manifest_yaml: str = Field(default="manifest.yaml")
    preview_html: str = Field(default="preview.html")
    write_preview: bool = Field(default=False)

class LoggingConfig(BaseSettings):
    processor_log: str = Field(default="processor.log")
    extractor_log: str = Field(default="extractor.log")
    writer_log: str = Field(default="writer.log")
    analysis_log: str = Field(default="analysis.log")
    console_level: str = Field(default="INFO")
    file_level: str = Field(default="DEBUG")

class Config(BaseSettings):
    paths: PathsConfig = Field(default_factory=PathsConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    files: FilesConfig = Field(default_factory=FilesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        arbitrary_types_allowed=True
    )

    @classmethod
    def load_from_yaml(cls, yaml_path: Path) -> "Config":
        with yaml_path.open("r") as f:
            yaml_data = yaml.safe_load(f) or {}
        return cls(**yaml_data)

# Create a global config instance
config = Config.load_from_yaml(Path(__file__).parent / "config.yml")
