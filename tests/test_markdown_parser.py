"""Artifact body parsing tests."""

import pytest

from docrender.data.markdown_parser import LineKind, MarkdownStructureParser, classify_line, strip_inline


@pytest.fixture
def parser():
    return MarkdownStructureParser()


def test_rules_scenario(parser):
    table = parser.parse("# Regras\n- Regra 1\n- Regra 2", "Doc")
    assert table.rows == [["1", "Regras", "Regra 1"], ["2", "Regras", "Regra 2"]]
    assert table.headers == ("Item", "Categoria", "Conteúdo")


def test_row_count_matches_items_and_plain_lines(parser, artifact_body):
    table = parser.parse(artifact_body, "Ata")
    # 2 bullets + 2 numbered + 1 plain line; headings, blank and rule are dropped
    assert len(table.rows) == 5


def test_categories_follow_nearest_heading(parser, artifact_body):
    rows = parser.parse(artifact_body, "Ata").rows
    assert [row[1] for row in rows] == [
        "Regras de Negócio", "Regras de Negócio", "Pontos de Ação", "Pontos de Ação", "Pontos de Ação",
    ]


def test_counter_does_not_reset_per_section(parser, artifact_body):
    rows = parser.parse(artifact_body, "Ata").rows
    assert [row[0] for row in rows] == ["1", "2", "3", "4", "5"]


def test_inline_markup_is_stripped(parser, artifact_body):
    rows = parser.parse(artifact_body, "Ata").rows
    assert rows[0][2] == "Regra 1: pedidos acima de R$ 100"
    assert rows[1][2] == "Regra 2 usa codigo"
    assert rows[3][2] == "Revisar contrato"


def test_title_is_category_before_first_heading(parser):
    rows = parser.parse("Introdução geral\n## Seção\n- item", "Ata de Reunião").rows
    assert rows == [["1", "Ata de Reunião", "Introdução geral"], ["2", "Seção", "item"]]


def test_heading_markup_is_stripped(parser):
    rows = parser.parse("## **Decisões**\n- aprovada", "Ata").rows
    assert rows == [["1", "Decisões", "aprovada"]]


def test_generated_at_line_is_dropped(parser):
    rows = parser.parse("*Gerado em: 18/10/2026 14:30:00*\n- item\nGenerated at: ontem", "Ata").rows
    assert rows == [["1", "Ata", "item"]]


def test_metadata_row_is_appended(parser, generated_at):
    rows = parser.parse("- item", "Ata", generated_at).rows
    assert rows[-1] == ["", "Metadata", "18/10/2026 14:30:00"]
    assert len(rows) == 2


def test_empty_body(parser):
    assert parser.parse("", "Ata").rows == []


@pytest.mark.parametrize(
    "line, kind",
    [
        ("", LineKind.BLANK),
        ("   ", LineKind.BLANK),
        ("# Título", LineKind.HEADING),
        ("###### Fundo", LineKind.HEADING),
        ("#hashtag", LineKind.TEXT),
        ("- item", LineKind.BULLET),
        ("* item", LineKind.BULLET),
        ("  - recuado", LineKind.BULLET),
        ("1. um", LineKind.NUMBERED),
        ("12) doze", LineKind.NUMBERED),
        ("---", LineKind.RULE),
        ("***", LineKind.RULE),
        ("- - -", LineKind.RULE),
        ("___", LineKind.RULE),
        ("**negrito** no início", LineKind.TEXT),
        ("*itálico* no início", LineKind.TEXT),
        ("Gerado em: hoje", LineKind.METADATA),
        ("texto comum", LineKind.TEXT),
    ],
)
def test_classify_line(line, kind):
    assert classify_line(line).kind == kind


def test_classify_heading_level_and_number():
    assert classify_line("### Nível").level == 3
    assert classify_line("7. sete").level == 7


def test_strip_inline():
    assert strip_inline("**a** *b* `c`") == "a b c"
