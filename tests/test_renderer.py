"""Artifact rendering tests."""

import csv
import io
from unittest.mock import patch

import pytest
from docx import Document
from docx.enum.text import WD_ALIGN_PARAGRAPH
from openpyxl import load_workbook
from pypdf import PdfReader

from docrender.data.errors import RenderError, UnsupportedFormatError
from docrender.data.formats import DocumentFormat
from docrender.data.models import ArtifactDocument, RenderedDocument
from docrender.data.renderers import strip_html
from docrender.service.renderer import MultiFormatRenderer
from tests.conftest import DOCX_MIME, XLSX_MIME


@pytest.fixture
def renderer():
    return MultiFormatRenderer()


def _csv_rows(rendered: RenderedDocument):
    return list(csv.reader(io.StringIO(rendered.data.decode("utf-8-sig"))))


def test_markdown(renderer, artifact_body, generated_at):
    rendered = renderer.render(artifact_body, "Ata", generated_at, "md")
    text = rendered.data.decode("utf-8")

    assert text.startswith("# Ata\n")
    assert "*Gerado em: 18/10/2026 14:30:00*" in text
    assert text.endswith(artifact_body)
    assert rendered.mime_type == "text/markdown"
    assert rendered.file_name == "Ata-18-10-2026-14-30.md"


def test_plain_text(renderer, artifact_body, generated_at):
    rendered = renderer.render(artifact_body, "Ata", generated_at, DocumentFormat.TEXT)
    lines = rendered.data.decode("utf-8").splitlines()

    assert lines[0] == "Ata"
    assert lines[1] == "Gerado em: 18/10/2026 14:30:00"
    assert "Regras de Negócio" in lines
    assert "• Regra 1: pedidos acima de R$ 100" in lines
    assert "• Regra 2 usa codigo" in lines
    assert "2. Revisar contrato" in lines
    assert not any(line.startswith("#") or "**" in line or "`" in line for line in lines)
    assert rendered.mime_type == "text/plain"


def test_plain_text_strips_html(renderer, generated_at):
    rendered = renderer.render("<p>Olá&nbsp;<b>mundo</b> &amp; cia</p>", "Ata", generated_at, "txt")
    assert "Olá mundo & cia" in rendered.data.decode("utf-8")


def test_strip_html():
    assert strip_html("<p>a &lt; b &quot;c&quot;</p>") == 'a < b "c"'


def test_csv(renderer, artifact_body, generated_at):
    rendered = renderer.render(artifact_body, "Ata", generated_at, "csv")

    assert rendered.data.startswith(b"\xef\xbb\xbf")
    assert rendered.mime_type == "text/csv"
    rows = _csv_rows(rendered)
    assert rows[0] == ["Item", "Categoria", "Conteúdo"]
    assert rows[1] == ["1", "Regras de Negócio", "Regra 1: pedidos acima de R$ 100"]
    assert rows[-1] == ["", "Metadata", "18/10/2026 14:30:00"]
    assert len(rows) == 1 + 5 + 1


def test_csv_quotes_every_field(renderer, generated_at):
    rendered = renderer.render('- disse "sim", e saiu', "Ata", generated_at, "csv")
    text = rendered.data.decode("utf-8-sig")
    assert '"1","Ata","disse ""sim"", e saiu"' in text
    assert text.splitlines()[0] == '"Item","Categoria","Conteúdo"'


def test_xlsx(renderer, artifact_body, generated_at):
    rendered = renderer.render(artifact_body, "Ata", generated_at, "xlsx")
    assert rendered.mime_type == XLSX_MIME

    workbook = load_workbook(io.BytesIO(rendered.data))
    assert len(workbook.worksheets) == 1
    sheet = workbook.active
    assert sheet.title == "Artefato"
    grid = [list(row) for row in sheet.iter_rows(values_only=True)]
    assert grid[0] == ["Item", "Categoria", "Conteúdo"]
    assert grid[1] == ["1", "Regras de Negócio", "Regra 1: pedidos acima de R$ 100"]
    assert all(len(row) == 3 for row in grid)
    assert sheet["A1"].font.bold
    assert sheet.column_dimensions["A"].width < sheet.column_dimensions["B"].width < sheet.column_dimensions["C"].width


def test_csv_and_xlsx_agree(renderer, artifact_body, generated_at):
    csv_rows = _csv_rows(renderer.render(artifact_body, "Ata", generated_at, "csv"))
    workbook = load_workbook(io.BytesIO(renderer.render(artifact_body, "Ata", generated_at, "xlsx").data))
    xlsx_rows = list(workbook.active.iter_rows(values_only=True))

    assert list(xlsx_rows[0]) == csv_rows[0]
    assert len(xlsx_rows) == len(csv_rows)


def test_docx(renderer, artifact_body, generated_at):
    rendered = renderer.render(artifact_body + "#### Fundo\n", "Ata", generated_at, "docx")
    assert rendered.mime_type == DOCX_MIME
    assert rendered.file_name == "Ata-18-10-2026-14-30.docx"

    doc = Document(io.BytesIO(rendered.data))
    paragraphs = [(p.style.name, p.text) for p in doc.paragraphs]

    assert paragraphs[0] == ("Title", "Ata")
    meta = doc.paragraphs[1]
    assert meta.text == "Gerado em: 18/10/2026 14:30:00"
    assert meta.runs[0].italic
    assert meta.alignment == WD_ALIGN_PARAGRAPH.CENTER
    assert paragraphs[2][1] == ""

    assert ("Heading 1", "Regras de Negócio") in paragraphs
    assert ("Heading 2", "Pontos de Ação") in paragraphs
    assert ("Heading 3", "Fundo") in paragraphs
    assert ("List Bullet", "Regra 1: pedidos acima de R$ 100") in paragraphs
    assert ("List Number", "Enviar proposta") in paragraphs
    assert ("List Number", "Revisar contrato") in paragraphs
    assert ("Normal", "Observação final do grupo") in paragraphs
    assert not any(text == "---" for _, text in paragraphs)


def test_pdf(renderer, artifact_body, generated_at):
    rendered = renderer.render(artifact_body, "Ata de Reunião", generated_at, "pdf")
    assert rendered.mime_type == "application/pdf"
    assert rendered.data.startswith(b"%PDF")
    assert rendered.file_name == "Ata-de-Reunião-18-10-2026-14-30.pdf"

    reader = PdfReader(io.BytesIO(rendered.data))
    text = "\n".join(page.extract_text() for page in reader.pages)
    assert "Ata de Reunião" in text
    assert "Regra 1: pedidos acima de R$ 100" in text
    assert "**" not in text and "# " not in text


def test_pdf_escapes_markup_characters(renderer, generated_at):
    rendered = renderer.render("- a < b & c > d", "Ata", generated_at, "pdf")
    text = PdfReader(io.BytesIO(rendered.data)).pages[0].extract_text()
    assert "a < b & c > d" in text


def test_bundle_page_order(renderer, generated_at):
    artifacts = [
        ArtifactDocument("Primeiro Artefato", "- item A", generated_at),
        ArtifactDocument("Segundo Artefato", "- item B", generated_at),
    ]
    rendered = renderer.render_bundle(artifacts, "Pacote", generated_at=generated_at)
    assert rendered.file_name == "Pacote-18-10-2026-14-30.pdf"

    pages = PdfReader(io.BytesIO(rendered.data)).pages
    assert len(pages) == 3
    summary, first, second = (page.extract_text() for page in pages)
    assert "Pacote" in summary and "Itens: 2" in summary
    assert summary.index("1. Primeiro Artefato") < summary.index("2. Segundo Artefato")
    assert "Primeiro Artefato" in first and "item A" in first
    assert "Segundo Artefato" in second and "item B" in second


def test_bundle_rejects_other_formats(renderer):
    with pytest.raises(UnsupportedFormatError):
        renderer.render_bundle([ArtifactDocument("A", "x")], "Pacote", "docx")


def test_bundle_failure_discards_everything(renderer):
    artifacts = [ArtifactDocument("A", "x"), ArtifactDocument("B", "y")]
    with patch(
        "docrender.data.renderers.pdf_renderer.PdfRenderer._body",
        side_effect=[[], RuntimeError("boom")],
    ):
        with pytest.raises(RenderError, match="boom"):
            renderer.render_bundle(artifacts, "Pacote")


def test_unknown_format(renderer):
    with pytest.raises(UnsupportedFormatError):
        renderer.render("x", "Ata", None, "pptx")


def test_encoder_failure_is_wrapped(renderer):
    with patch("docrender.data.renderers.xlsx_renderer.XlsxRenderer.render", side_effect=RuntimeError("disk")):
        with pytest.raises(RenderError) as excinfo:
            renderer.render("- x", "Ata", None, "xlsx")
    assert excinfo.value.format_name == "XLSX"
    assert "disk" in str(excinfo.value)


def test_missing_timestamp_defaults_to_now(renderer):
    rendered = renderer.render("- x", "Ata", None, "txt")
    assert "Gerado em: " in rendered.data.decode("utf-8")
    assert rendered.file_name.startswith("Ata-") and rendered.file_name.endswith(".txt")


def test_content_disposition():
    rendered = RenderedDocument(b"", "application/pdf", 'Ata-"x".pdf')
    assert MultiFormatRenderer.content_disposition(rendered) == 'attachment; filename="Ata-x.pdf"'


def test_plain_text_keeps_angle_brackets(renderer, generated_at):
    body = "- prazo < 5 dias e custo > 10\nContato <ana@x.com>\na < b e c > d"
    lines = renderer.render(body, "Ata", generated_at, "txt").data.decode("utf-8").splitlines()

    assert "• prazo < 5 dias e custo > 10" in lines
    assert "Contato <ana@x.com>" in lines
    assert "a < b e c > d" in lines


def test_strip_html_leaves_plain_text_alone():
    assert strip_html("a < b &amp; c > d") == "a < b &amp; c > d"
    assert strip_html("<br/>linha<br>") == "linha"
