from __future__ import annotations

from pathlib import Path

import pytest

import hsescreening.pdf_utils as pdf_utils

PDF_MARKDOWN = (
    "# Curriculum Vitae\n"
    "Confidential - do not distribute 1 / 3\n"
    "NEBOSH IGC, 8 years offshore\n"
    "Confidential - do not distribute 2 / 3\n"
    "footer"
)


@pytest.fixture(autouse=True)
def stub_pymupdf4llm(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    calls: list[str] = []

    def fake_to_markdown(path: str) -> str:
        calls.append(path)
        return PDF_MARKDOWN

    monkeypatch.setattr(pdf_utils.pymupdf4llm, "to_markdown", fake_to_markdown)
    return calls


def test_extract_text_converts_pdf_through_pymupdf4llm(tmp_path: Path, stub_pymupdf4llm: list[str]) -> None:
    pdf_file = tmp_path / "resume.PDF"
    pdf_file.write_bytes(b"%PDF-1.4\n% Dummy")  # Presence is enough, content not used.

    result = pdf_utils.extract_text(pdf_file)

    assert stub_pymupdf4llm == [str(pdf_file)]
    assert "NEBOSH IGC" in result


def test_extract_text_drops_excluded_lines(tmp_path: Path) -> None:
    pdf_file = tmp_path / "resume.pdf"
    pdf_file.write_bytes(b"%PDF-1.4\n% Dummy")

    result = pdf_utils.extract_text(pdf_file, exclude_patterns=["Confidential - do not distribute"])

    assert "Confidential" not in result
    assert "# Curriculum Vitae" in result
    assert "footer" in result


def test_extract_text_reads_plain_text(tmp_path: Path, stub_pymupdf4llm: list[str]) -> None:
    txt_file = tmp_path / "resume.txt"
    txt_file.write_text("Safety Officer\nADOSH certified\n", encoding="utf-8")

    result = pdf_utils.extract_text(txt_file)

    assert result == "Safety Officer\nADOSH certified\n"
    assert stub_pymupdf4llm == []


def test_extract_text_rejects_other_file_types(tmp_path: Path) -> None:
    docx_file = tmp_path / "resume.docx"
    docx_file.write_bytes(b"PK")

    assert pdf_utils.is_supported(docx_file) is False
    with pytest.raises(pdf_utils.UnsupportedFileType):
        pdf_utils.extract_text(docx_file)


def test_extract_text_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        pdf_utils.extract_text(tmp_path / "missing.pdf")


def test_extract_text_wraps_pdf_parse_errors(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    pdf_file = tmp_path / "corrupt.pdf"
    pdf_file.write_bytes(b"not a pdf")

    def broken_to_markdown(path: str) -> str:
        raise RuntimeError(f"Failed to open file '{path}' as type pdf.")

    monkeypatch.setattr(pdf_utils.pymupdf4llm, "to_markdown", broken_to_markdown)

    with pytest.raises(pdf_utils.TextExtractionError, match="corrupt.pdf") as exc:
        pdf_utils.extract_text(pdf_file)

    assert isinstance(exc.value, OSError)
