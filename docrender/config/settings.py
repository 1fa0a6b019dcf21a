"""Project settings."""

from dotenv import load_dotenv
import os
from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, Field

# .env.example first (lowest priority), then .env, environment variables win
load_dotenv(dotenv_path=Path(__file__).parent.parent.parent / '.env.example', override=False)
load_dotenv(dotenv_path=Path(__file__).parent.parent.parent / '.env', override=True)


class DocumentConfig(BaseModel):
    """Template handling settings."""

    max_file_size: int = Field(default_factory=lambda: int(os.environ.get("MAX_FILE_SIZE", str(10 * 1024 * 1024))))  # bytes
    filled_suffix: str = Field(default_factory=lambda: os.environ.get("FILLED_SUFFIX", "_filled"))  # appended to the stem of filled files
    default_template_name: str = Field(default_factory=lambda: os.environ.get("DEFAULT_TEMPLATE_NAME", "template"))  # stem for text templates


class RenderConfig(BaseModel):
    """Artifact rendering settings."""

    timezone: str = Field(default_factory=lambda: os.environ.get("RENDER_TIMEZONE", "America/Sao_Paulo"))
    timestamp_format: str = Field(default_factory=lambda: os.environ.get("TIMESTAMP_FORMAT", "%d/%m/%Y %H:%M:%S"))
    filename_timestamp_format: str = Field(default_factory=lambda: os.environ.get("FILENAME_TIMESTAMP_FORMAT", "%d-%m-%Y-%H-%M"))
    generated_label: str = Field(default_factory=lambda: os.environ.get("GENERATED_LABEL", "Gerado em"))
    metadata_category: str = Field(default_factory=lambda: os.environ.get("METADATA_CATEGORY", "Metadata"))
    fallback_title: str = Field(default_factory=lambda: os.environ.get("FALLBACK_TITLE", "documento"))
    bullet_glyph: str = "•"

    # tabular output
    table_headers: Tuple[str, str, str] = ("Item", "Categoria", "Conteúdo")
    sheet_title: str = Field(default_factory=lambda: os.environ.get("SHEET_TITLE", "Artefato"))
    index_column_width: int = 8
    category_column_width: int = 30
    content_column_width: int = 80

    # pdf
    pdf_margin_mm: int = 18
    pdf_title_size: int = 24
    pdf_meta_size: int = 10
    pdf_body_size: int = 12
    pdf_meta_color: str = "#666666"
    bundle_items_label: str = Field(default_factory=lambda: os.environ.get("BUNDLE_ITEMS_LABEL", "Itens"))


class LogConfig(BaseModel):
    """Logging settings."""

    level: str = Field(default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"))
    format: str = Field(default_factory=lambda: os.environ.get("LOG_FORMAT", "<level>{level: <8}</level>| <cyan>{name}</cyan> - <level>{message}</level>"))
    log_file: Optional[str] = Field(default_factory=lambda: os.environ.get("LOG_FILE") or None)  # file sink is off unless set
    rotation: str = Field(default_factory=lambda: os.environ.get("LOG_ROTATION", "10 MB"))
    retention: str = Field(default_factory=lambda: os.environ.get("LOG_RETENTION", "1 week"))


class Settings(BaseModel):
    """Global settings."""

    document: DocumentConfig = Field(default_factory=DocumentConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    project_dir: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)
    output_dir: Path = Field(default_factory=lambda: Path(os.environ.get("OUTPUT_DIR", str(Path(__file__).parent.parent.parent / "output"))))


# singleton, avoids re-reading the environment
_settings = None
def get_settings():
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

settings = get_settings()
