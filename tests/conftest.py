"""Shared fixtures: in-memory templates."""

import io
from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest
from docx import Document
from openpyxl import Workbook

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def build_docx(
    paragraphs: List[str],
    table: Optional[List[List[str]]] = None,
    header: Optional[str] = None,
    split_runs: Optional[List[List[str]]] = None,
) -> bytes:
    """Build a .docx with body paragraphs, an optional table and header.

    ``split_runs`` adds paragraphs whose text is stored in several runs.
    """
    doc = Document()
    if header is not None:
        doc.sections[0].header.is_linked_to_previous = False
        doc.sections[0].header.paragraphs[0].text = header
    for text in paragraphs:
        doc.add_paragraph(text)
    for runs in split_runs or []:
        para = doc.add_paragraph()
        for run_text in runs:
            para.add_run(run_text)
    if table:
        grid = doc.add_table(rows=len(table), cols=len(table[0]))
        for r, row in enumerate(table):
            for c, value in enumerate(row):
                grid.cell(r, c).text = value
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def build_xlsx(sheets: Dict[str, Dict[str, object]]) -> bytes:
    """Build a .xlsx from ``{sheet title: {cell ref: value}}``."""
    workbook = Workbook()
    workbook.remove(workbook.active)
    for title, cells in sheets.items():
        sheet = workbook.create_sheet(title)
        for ref, value in cells.items():
            sheet[ref] = value
    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def docx_template() -> bytes:
    return build_docx(
        ["Contrato de {{NOME}}", "Texto fixo sem marcadores", "CPF: {{CPF}}"],
        table=[["Campo", "Valor"], ["Data", "{{DATA}}"]],
    )


@pytest.fixture
def xlsx_template() -> bytes:
    return build_xlsx({
        "Dados": {"A1": "{{NOME}}", "B1": 42, "C1": "Total"},
        "Resumo": {"B2": "Emitido em {{DATA}}"},
    })


@pytest.fixture
def generated_at() -> datetime:
    # 14:30 in America/Sao_Paulo
    return datetime(2026, 10, 18, 17, 30, tzinfo=timezone.utc)


@pytest.fixture
def artifact_body() -> str:
    return (
        "# Regras de Negócio\n"
        "- **Regra 1**: pedidos acima de R$ 100\n"
        "- Regra 2 usa `codigo`\n"
        "\n"
        "---\n"
        "## Pontos de Ação\n"
        "1. Enviar proposta\n"
        "2) Revisar *contrato*\n"
        "Observação final do grupo\n"
    )
