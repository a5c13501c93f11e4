"""Tests covering magic-byte detection from buffers and paths."""

from pathlib import Path

import pytest

from filesig.detection import (
    HEADER_LENGTH,
    SIGNATURES,
    HeaderReader,
    UnreadableFileError,
    detect,
    detect_path,
    find_by_extension,
    supported_mime_types,
)
from filesig.detection import catalog


def test_detect_pdf() -> None:
    result = detect(bytes.fromhex("25 50 44 46 2D 31 2E 34"))

    assert result is not None
    assert result.name == "PDF"
    assert result.mime_type == "application/pdf"
    assert result.extension == "pdf"


def test_detect_zip_reports_office_extensions() -> None:
    result = detect(bytes.fromhex("50 4B 03 04 00 00 00 00"))

    assert result is not None
    assert result.name == "ZIP"
    assert result.mime_type == "application/zip"
    assert "docx" in result.extensions


def test_detect_jpeg() -> None:
    result = detect(bytes.fromhex("FF D8 FF E0"))

    assert result is not None
    assert result.mime_type == "image/jpeg"


@pytest.mark.parametrize(
    ("header", "name", "mime"),
    [
        (b"\x89PNG\r\n\x1a\n", "PNG", "image/png"),
        (b"GIF89a\x01\x00", "GIF", "image/gif"),
        (b"GIF87a\x01\x00", "GIF", "image/gif"),
        (b"\x1f\x8b\x08\x00", "GZIP", "application/gzip"),
        (b"ID3\x04\x00\x00", "MP3", "audio/mpeg"),
        (b"\x7fELF\x02\x01", "ELF", "application/x-executable"),
        (b"MZ\x90\x00", "Windows Executable", "application/x-msdownload"),
        (b"{\\rtf1\\ansi", "Rich Text Format", "application/rtf"),
        (b"\xffWPC\x10\x00\x00\x00", "WordPerfect Document", "application/vnd.wordperfect"),
        (b"PK\x05\x06\x00\x00", "ZIP (empty archive)", "application/zip"),
        (b"PK\x07\x08\x00\x00", "ZIP (spanned archive)", "application/zip"),
        (b"RIFF\x24\x00\x00\x00WAVE", "RIFF Container", "application/x-riff"),
    ],
)
def test_detect_known_formats(header: bytes, name: str, mime: str) -> None:
    result = detect(header)

    assert result is not None
    assert result.name == name
    assert result.mime_type == mime


def test_detect_compound_document() -> None:
    result = detect(bytes.fromhex("D0 CF 11 E0 A1 B1 1A E1"))

    assert result is not None
    assert result.name == "Microsoft Compound Document"
    assert result.mime_type == "application/msword"
    assert {"doc", "xls"} <= set(result.extensions)


@pytest.mark.parametrize(
    ("header", "name"),
    [
        (b"\xef\xbb\xbfHello", "UTF-8 Text (BOM)"),
        (b"\xff\xfeH\x00e\x00", "UTF-16 LE Text (BOM)"),
        (b"\xfe\xff\x00H\x00e", "UTF-16 BE Text (BOM)"),
        (b"\xff\xfe\x00\x00H\x00\x00\x00", "UTF-32 LE Text (BOM)"),
        (b"\x00\x00\xfe\xff\x00\x00\x00H", "UTF-32 BE Text (BOM)"),
    ],
)
def test_detect_text_byte_order_marks(header: bytes, name: str) -> None:
    result = detect(header)

    assert result is not None
    assert result.name == name
    assert result.mime_type == "text/plain"
    assert result.is_bom


@pytest.mark.parametrize(
    "text",
    ["<!DOCTYPE html>", "<!doctype html>", "<!DOCTYPE HTML PUBLIC", "<html><head>", "<HTML>"],
)
def test_detect_html(text: str) -> None:
    result = detect(text.encode("utf-8"))

    assert result is not None
    assert result.name == "HTML"
    assert result.mime_type == "text/html"


def test_detect_xml_declaration() -> None:
    result = detect(b'<?xml version="1.0"?>')

    assert result is not None
    assert result.name == "XML"
    assert result.mime_type == "application/xml"


def test_unknown_bytes_return_none() -> None:
    assert detect(bytes.fromhex("01 02 03 04 05 06")) is None


def test_empty_buffer_returns_none() -> None:
    assert detect(b"") is None


def test_truncated_pattern_does_not_match() -> None:
    assert detect(bytes.fromhex("25 50")) is None


@pytest.mark.parametrize("signature", SIGNATURES, ids=lambda s: f"{s.name}-{s.pattern.hex()}")
def test_partial_pattern_never_matches_its_entry(signature) -> None:
    truncated = signature.pattern[:-1]

    assert detect(truncated) is not signature


def test_detect_accepts_bytearray_and_memoryview() -> None:
    header = b"%PDF-1.7\n"

    assert detect(bytearray(header)) is catalog.PDF
    assert detect(memoryview(header)) is catalog.PDF


def test_detect_is_idempotent() -> None:
    header = b"PK\x03\x04" + b"\x00" * 20

    assert detect(header) is detect(header)


def test_detect_returns_catalog_entry_not_copy() -> None:
    assert detect(b"\x89PNG\r\n\x1a\n") is catalog.PNG


def test_detect_path_reads_file(tmp_path: Path) -> None:
    pdf_file = tmp_path / "test.pdf"
    pdf_file.write_bytes(bytes.fromhex("25 50 44 46 2D 31 2E 34"))

    result = detect_path(pdf_file)

    assert result is not None
    assert result.name == "PDF"


def test_detect_path_accepts_string_paths(tmp_path: Path) -> None:
    png_file = tmp_path / "test.png"
    png_file.write_bytes(b"\x89PNG\r\n\x1a\n")

    result = detect_path(str(png_file))

    assert result is not None
    assert result.name == "PNG"


def test_detect_path_missing_file_returns_none(tmp_path: Path) -> None:
    assert detect_path(tmp_path / "does-not-exist.bin") is None


def test_detect_path_directory_returns_none(tmp_path: Path) -> None:
    assert detect_path(tmp_path) is None


def test_detect_path_embedded_nul_returns_none(tmp_path: Path) -> None:
    assert detect_path(str(tmp_path / "resume\x00.pdf")) is None


def test_detect_path_unknown_user_home_returns_none(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    assert detect_path("~no_such_user_zz/resume.pdf") is None


def test_detect_path_does_not_expand_tilde(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    literal = tmp_path / "~"
    literal.mkdir()
    (literal / "resume.pdf").write_bytes(b"%PDF-1.7")
    monkeypatch.chdir(tmp_path)

    result = detect_path("~/resume.pdf")

    assert result is catalog.PDF


def test_detect_path_empty_file_returns_none(tmp_path: Path) -> None:
    empty = tmp_path / "empty.bin"
    empty.write_bytes(b"")

    assert detect_path(empty) is None


def test_detect_path_uses_supplied_reader(tmp_path: Path) -> None:
    calls: list[tuple[Path, int]] = []

    class _RecordingReader(HeaderReader):
        def read(self, path, length=HEADER_LENGTH):  # type: ignore[override]
            calls.append((Path(path), length))
            return b"OggS\x00\x02"

    result = detect_path(tmp_path / "audio.ogg", reader=_RecordingReader(), length=8)

    assert result is catalog.OGG
    assert calls == [(tmp_path / "audio.ogg", 8)]


def test_detect_path_converts_reader_failures(tmp_path: Path) -> None:
    class _FailingReader(HeaderReader):
        def read(self, path, length=HEADER_LENGTH):  # type: ignore[override]
            raise UnreadableFileError(Path(path), "Permission denied")

    assert detect_path(tmp_path / "locked.pdf", reader=_FailingReader()) is None


def test_header_reader_bounds_the_read(tmp_path: Path) -> None:
    target = tmp_path / "big.bin"
    target.write_bytes(b"%PDF" + b"x" * 1000)

    header = HeaderReader().read(target)

    assert len(header) == HEADER_LENGTH
    assert header.startswith(b"%PDF")


def test_header_reader_returns_short_files_whole(tmp_path: Path) -> None:
    target = tmp_path / "short.bin"
    target.write_bytes(b"BM")

    assert HeaderReader().read(target, 64) == b"BM"


def test_header_reader_wraps_os_errors(tmp_path: Path) -> None:
    missing = tmp_path / "missing.bin"

    with pytest.raises(UnreadableFileError) as excinfo:
        HeaderReader().read(missing)

    assert excinfo.value.path == missing
    assert isinstance(excinfo.value.__cause__, OSError)


def test_header_reader_wraps_malformed_paths(tmp_path: Path) -> None:
    with pytest.raises(UnreadableFileError) as excinfo:
        HeaderReader().read(tmp_path / "bad\x00name.bin")

    assert isinstance(excinfo.value.__cause__, ValueError)


def test_header_reader_rejects_negative_length(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        HeaderReader().read(tmp_path / "any.bin", -1)


def test_find_by_extension_matches_shared_signatures() -> None:
    assert find_by_extension("docx") == (catalog.ZIP,)
    assert find_by_extension(".XLS") == (catalog.COMPOUND_DOCUMENT,)
    assert catalog.TIFF_BE in find_by_extension("tif")
    assert find_by_extension("unknown-ext") == ()
    assert find_by_extension("") == ()


def test_supported_mime_types_cover_catalog() -> None:
    mime_types = supported_mime_types()

    assert "application/pdf" in mime_types
    assert "text/plain" in mime_types
    assert mime_types == {signature.mime_type for signature in SIGNATURES}
