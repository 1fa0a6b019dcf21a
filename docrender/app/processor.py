"""Command-line application."""

import json
import mimetypes
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import typer
from loguru import logger

from docrender.config.settings import settings
from docrender.data.errors import DocumentError
from docrender.data.models import ArtifactDocument, RenderedDocument, Template
from docrender.service.extractor import PlaceholderExtractor
from docrender.service.filler import TemplateFillerService
from docrender.service.renderer import MultiFormatRenderer


@dataclass
class ProcessResult:
    """Outcome of one processor operation."""

    success: bool
    output_path: str = ""
    placeholders: List[str] = field(default_factory=list)
    error_message: Optional[str] = None

    @property
    def report(self) -> str:
        if not self.success:
            return f"Failed: {self.error_message}"
        if self.output_path:
            return f"Done!\n- Output file: {self.output_path}"
        if not self.placeholders:
            return "No placeholders found"
        return "Placeholders:\n" + "\n".join(f"- {name}" for name in self.placeholders)


class DocumentProcessor:
    """File-based front end over the extraction, filling and rendering services."""

    def __init__(self) -> None:
        self.extractor = PlaceholderExtractor()
        self.filler = TemplateFillerService()
        self.renderer = MultiFormatRenderer()

    @staticmethod
    def load_template(input_path: str) -> Template:
        path = Path(input_path)
        mime_type, _ = mimetypes.guess_type(path.name)
        return Template.from_file(path.read_bytes(), mime_type, path.name)

    def list_placeholders(self, input_path: str, strict: bool = False) -> ProcessResult:
        try:
            template = self.load_template(input_path)
            placeholders = self.extractor.extract_from_template(template, strict=strict)
            return ProcessResult(success=True, placeholders=sorted(placeholders))
        except (DocumentError, OSError) as e:
            logger.error(f"Error while scanning {input_path}: {e}")
            return ProcessResult(success=False, error_message=str(e))

    def fill(
        self,
        input_path: str,
        data: Dict[str, str],
        output_path: Optional[str] = None,
        require_complete: bool = False,
    ) -> ProcessResult:
        try:
            logger.info(f"Filling template: {input_path}")
            template = self.extractor.cache_placeholders(self.load_template(input_path))
            mapping = self.filler.validate_mapping(template, data)
            if mapping.missing:
                logger.warning(f"No value supplied for: {', '.join(mapping.missing)}")
            rendered = self.filler.fill(template, data, require_complete=require_complete)
            target = self._write(rendered, output_path, Path(input_path).parent)
            return ProcessResult(success=True, output_path=str(target), placeholders=sorted(template.placeholders))
        except (DocumentError, OSError) as e:
            logger.error(f"Error while filling {input_path}: {e}")
            return ProcessResult(success=False, error_message=str(e))

    def render(
        self,
        body_path: str,
        fmt: str,
        title: Optional[str] = None,
        output_path: Optional[str] = None,
    ) -> ProcessResult:
        try:
            path = Path(body_path)
            body = path.read_text(encoding="utf-8")
            rendered = self.renderer.render(body, title or path.stem, None, fmt)
            target = self._write(rendered, output_path, path.parent)
            return ProcessResult(success=True, output_path=str(target))
        except (DocumentError, OSError) as e:
            logger.error(f"Error while rendering {body_path}: {e}")
            return ProcessResult(success=False, error_message=str(e))

    def bundle(self, body_paths: List[str], title: str, output_path: Optional[str] = None) -> ProcessResult:
        try:
            artifacts = [
                ArtifactDocument(title=Path(p).stem, body=Path(p).read_text(encoding="utf-8"))
                for p in body_paths
            ]
            rendered = self.renderer.render_bundle(artifacts, title)
            target = self._write(rendered, output_path, settings.output_dir)
            return ProcessResult(success=True, output_path=str(target))
        except (DocumentError, OSError) as e:
            logger.error(f"Error while bundling {len(body_paths)} file(s): {e}")
            return ProcessResult(success=False, error_message=str(e))

    @staticmethod
    def _write(rendered: RenderedDocument, output_path: Optional[str], default_dir: Path) -> Path:
        target = Path(output_path) if output_path else default_dir / rendered.file_name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_bytes(rendered.data)
        logger.info(f"Saved {target}")
        return target


def parse_assignments(assignments: Optional[List[str]]) -> Dict[str, str]:
    """Turn ``KEY=VALUE`` strings into a dict.

    Raises:
        typer.BadParameter: an item has no ``=``
    """
    data: Dict[str, str] = {}
    for item in assignments or []:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"Expected KEY=VALUE, got '{item}'")
        data[key.strip()] = value
    return data


def _finish(result: ProcessResult) -> None:
    if result.success:
        typer.echo(typer.style(result.report, fg=typer.colors.GREEN))
    else:
        typer.echo(typer.style(result.report, fg=typer.colors.RED))
        raise typer.Exit(code=1)


# command-line interface
app = typer.Typer()


@app.command()
def placeholders(
    input_path: str = typer.Argument(..., help="Template file"),
    strict: bool = typer.Option(False, help="Fail when the file cannot be read"),
) -> None:
    """List the placeholders of a template file."""
    _finish(DocumentProcessor().list_placeholders(input_path, strict=strict))


@app.command()
def fill(
    input_path: str = typer.Argument(..., help="Template file"),
    set_values: Optional[List[str]] = typer.Option(None, "--set", help="KEY=VALUE, repeatable"),
    data_file: Optional[str] = typer.Option(None, "--data", help="JSON object with the values"),
    output_path: Optional[str] = typer.Option(None, "--output", help="Output path, defaults to '<name>_filled.<ext>'"),
    require_complete: bool = typer.Option(False, help="Fail when a placeholder has no value"),
) -> None:
    """Fill a template file's placeholders."""
    data: Dict[str, str] = {}
    if data_file:
        try:
            loaded = json.loads(Path(data_file).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise typer.BadParameter(f"--data must point to a readable JSON file: {e}") from e
        if not isinstance(loaded, dict):
            raise typer.BadParameter("--data must contain a JSON object")
        data.update({str(k): "" if v is None else str(v) for k, v in loaded.items()})
    data.update(parse_assignments(set_values))

    _finish(DocumentProcessor().fill(input_path, data, output_path, require_complete=require_complete))


@app.command()
def render(
    body_path: str = typer.Argument(..., help="Markdown artifact body"),
    fmt: str = typer.Option("pdf", "--format", help="md, txt, csv, xlsx, docx or pdf"),
    title: Optional[str] = typer.Option(None, help="Title, defaults to the file name"),
    output_path: Optional[str] = typer.Option(None, "--output", help="Output path"),
) -> None:
    """Render an artifact body to another format."""
    _finish(DocumentProcessor().render(body_path, fmt, title, output_path))


@app.command()
def bundle(
    body_paths: List[str] = typer.Argument(..., help="Markdown artifact bodies, in page order"),
    title: str = typer.Option("Artefatos", help="Bundle title"),
    output_path: Optional[str] = typer.Option(None, "--output", help="Output path"),
) -> None:
    """Render several artifact bodies into one PDF."""
    _finish(DocumentProcessor().bundle(body_paths, title, output_path))


if __name__ == "__main__":
    app()
