"""Ordered catalog of known file signatures.

Detection scans :data:`SIGNATURES` from top to bottom and reports the first
entry whose pattern prefixes the buffer, so position in the tuple is the
tie-break between patterns that could claim the same bytes:

* four-byte BOMs precede the shorter BOMs they start with,
* documents and markup declarations precede the generic ZIP container,
* everything above precedes raw image, audio, video, archive and executable
  signatures, none of which overlap one another.

Several formats (DOCX, XLSX, ODT, EPUB, JAR, APK) are ZIP archives on disk and
are reported as ZIP; telling them apart requires opening the archive.
"""

from __future__ import annotations

from typing import Tuple

from .models import FileSignature

HEADER_LENGTH = 24
"""Recommended number of leading bytes to hand to the detector."""

PDF_MIME = "application/pdf"
ZIP_MIME = "application/zip"
RTF_MIME = "application/rtf"
MSWORD_MIME = "application/msword"
WORDPERFECT_MIME = "application/vnd.wordperfect"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME = "text/plain"
HTML_MIME = "text/html"
XML_MIME = "application/xml"

_TEXT_EXTENSIONS = ("txt", "text")
_HTML_EXTENSIONS = ("html", "htm")

# Text byte-order marks ---------------------------------------------------

UTF32_LE_BOM = FileSignature(
    name="UTF-32 LE Text (BOM)",
    pattern=b"\xff\xfe\x00\x00",
    extension="txt",
    mime_type=TEXT_MIME,
    extensions=_TEXT_EXTENSIONS,
    is_bom=True,
)

UTF32_BE_BOM = FileSignature(
    name="UTF-32 BE Text (BOM)",
    pattern=b"\x00\x00\xfe\xff",
    extension="txt",
    mime_type=TEXT_MIME,
    extensions=_TEXT_EXTENSIONS,
    is_bom=True,
)

UTF8_BOM = FileSignature(
    name="UTF-8 Text (BOM)",
    pattern=b"\xef\xbb\xbf",
    extension="txt",
    mime_type=TEXT_MIME,
    extensions=_TEXT_EXTENSIONS,
    is_bom=True,
)

UTF16_LE_BOM = FileSignature(
    name="UTF-16 LE Text (BOM)",
    pattern=b"\xff\xfe",
    extension="txt",
    mime_type=TEXT_MIME,
    extensions=_TEXT_EXTENSIONS,
    is_bom=True,
)

UTF16_BE_BOM = FileSignature(
    name="UTF-16 BE Text (BOM)",
    pattern=b"\xfe\xff",
    extension="txt",
    mime_type=TEXT_MIME,
    extensions=_TEXT_EXTENSIONS,
    is_bom=True,
)

# Documents ---------------------------------------------------------------

PDF = FileSignature(
    name="PDF",
    pattern=b"%PDF",
    extension="pdf",
    mime_type=PDF_MIME,
    extensions=("pdf",),
)

RTF = FileSignature(
    name="Rich Text Format",
    pattern=b"{\\rtf",
    extension="rtf",
    mime_type=RTF_MIME,
    extensions=("rtf",),
)

# OLE2 container shared by the pre-2007 Office formats.
COMPOUND_DOCUMENT = FileSignature(
    name="Microsoft Compound Document",
    pattern=b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1",
    extension="doc",
    mime_type=MSWORD_MIME,
    extensions=("doc", "xls", "ppt", "msg"),
)

WORDPERFECT = FileSignature(
    name="WordPerfect Document",
    pattern=b"\xffWPC",
    extension="wpd",
    mime_type=WORDPERFECT_MIME,
    extensions=("wpd", "wp", "wp5", "wp6"),
)

# Markup declarations -----------------------------------------------------

XML = FileSignature(
    name="XML",
    pattern=b"<?xml",
    extension="xml",
    mime_type=XML_MIME,
    extensions=("xml", "xsd", "xsl"),
)

HTML_DOCTYPE = FileSignature(
    name="HTML",
    pattern=b"<!DOCTYPE html",
    extension="html",
    mime_type=HTML_MIME,
    extensions=_HTML_EXTENSIONS,
)

HTML_DOCTYPE_UPPER = FileSignature(
    name="HTML",
    pattern=b"<!DOCTYPE HTML",
    extension="html",
    mime_type=HTML_MIME,
    extensions=_HTML_EXTENSIONS,
)

HTML_DOCTYPE_LOWER = FileSignature(
    name="HTML",
    pattern=b"<!doctype html",
    extension="html",
    mime_type=HTML_MIME,
    extensions=_HTML_EXTENSIONS,
)

HTML_TAG = FileSignature(
    name="HTML",
    pattern=b"<html",
    extension="html",
    mime_type=HTML_MIME,
    extensions=_HTML_EXTENSIONS,
)

HTML_TAG_UPPER = FileSignature(
    name="HTML",
    pattern=b"<HTML",
    extension="html",
    mime_type=HTML_MIME,
    extensions=_HTML_EXTENSIONS,
)

# Generic containers ------------------------------------------------------

ZIP = FileSignature(
    name="ZIP",
    pattern=b"PK\x03\x04",
    extension="zip",
    mime_type=ZIP_MIME,
    extensions=("zip", "docx", "xlsx", "pptx", "odt", "ods", "odp", "epub", "jar", "apk"),
)

ZIP_EMPTY = FileSignature(
    name="ZIP (empty archive)",
    pattern=b"PK\x05\x06",
    extension="zip",
    mime_type=ZIP_MIME,
    extensions=("zip",),
)

ZIP_SPANNED = FileSignature(
    name="ZIP (spanned archive)",
    pattern=b"PK\x07\x08",
    extension="zip",
    mime_type=ZIP_MIME,
    extensions=("zip",),
)

# Images ------------------------------------------------------------------

PNG = FileSignature(
    name="PNG",
    pattern=b"\x89PNG\r\n\x1a\n",
    extension="png",
    mime_type="image/png",
    extensions=("png",),
)

JPEG = FileSignature(
    name="JPEG",
    pattern=b"\xff\xd8\xff",
    extension="jpg",
    mime_type="image/jpeg",
    extensions=("jpg", "jpeg"),
)

GIF89A = FileSignature(
    name="GIF",
    pattern=b"GIF89a",
    extension="gif",
    mime_type="image/gif",
    extensions=("gif",),
)

GIF87A = FileSignature(
    name="GIF",
    pattern=b"GIF87a",
    extension="gif",
    mime_type="image/gif",
    extensions=("gif",),
)

BMP = FileSignature(
    name="BMP",
    pattern=b"BM",
    extension="bmp",
    mime_type="image/bmp",
    extensions=("bmp",),
)

TIFF_BE = FileSignature(
    name="TIFF",
    pattern=b"MM\x00*",
    extension="tiff",
    mime_type="image/tiff",
    extensions=("tiff", "tif"),
)

TIFF_LE = FileSignature(
    name="TIFF",
    pattern=b"II*\x00",
    extension="tiff",
    mime_type="image/tiff",
    extensions=("tiff", "tif"),
)

# WAV, WebP and AVI all open with "RIFF"; the form type lives at offset 8.
RIFF = FileSignature(
    name="RIFF Container",
    pattern=b"RIFF",
    extension="riff",
    mime_type="application/x-riff",
    extensions=("wav", "webp", "avi"),
)

# Audio -------------------------------------------------------------------

MP3 = FileSignature(
    name="MP3",
    pattern=b"ID3",
    extension="mp3",
    mime_type="audio/mpeg",
    extensions=("mp3",),
)

FLAC = FileSignature(
    name="FLAC",
    pattern=b"fLaC",
    extension="flac",
    mime_type="audio/flac",
    extensions=("flac",),
)

OGG = FileSignature(
    name="OGG",
    pattern=b"OggS",
    extension="ogg",
    mime_type="audio/ogg",
    extensions=("ogg", "oga", "ogv", "ogx"),
)

# Video -------------------------------------------------------------------

MKV = FileSignature(
    name="MKV",
    pattern=b"\x1a\x45\xdf\xa3",
    extension="mkv",
    mime_type="video/x-matroska",
    extensions=("mkv", "webm"),
)

FLV = FileSignature(
    name="FLV",
    pattern=b"FLV\x01",
    extension="flv",
    mime_type="video/x-flv",
    extensions=("flv",),
)

# Leading zero bytes of the ISO-BMFF box size.
MP4 = FileSignature(
    name="MP4",
    pattern=b"\x00\x00\x00",
    extension="mp4",
    mime_type="video/mp4",
    extensions=("mp4", "m4v", "m4a", "mov"),
)

# Archives ----------------------------------------------------------------

RAR = FileSignature(
    name="RAR",
    pattern=b"Rar!\x1a\x07\x00",
    extension="rar",
    mime_type="application/x-rar-compressed",
    extensions=("rar",),
)

SEVEN_ZIP = FileSignature(
    name="7Z",
    pattern=b"7z\xbc\xaf\x27\x1c",
    extension="7z",
    mime_type="application/x-7z-compressed",
    extensions=("7z",),
)

GZIP = FileSignature(
    name="GZIP",
    pattern=b"\x1f\x8b\x08",
    extension="gz",
    mime_type="application/gzip",
    extensions=("gz", "tgz"),
)

BZIP2 = FileSignature(
    name="BZIP2",
    pattern=b"BZh",
    extension="bz2",
    mime_type="application/x-bzip2",
    extensions=("bz2",),
)

XZ = FileSignature(
    name="XZ",
    pattern=b"\xfd7zXZ\x00",
    extension="xz",
    mime_type="application/x-xz",
    extensions=("xz",),
)

# Executables -------------------------------------------------------------

ELF = FileSignature(
    name="ELF",
    pattern=b"\x7fELF",
    extension="elf",
    mime_type="application/x-executable",
    extensions=("elf", "so", "bin"),
)

MACHO = FileSignature(
    name="Mach-O",
    pattern=b"\xcf\xfa\xed\xfe",
    extension="macho",
    mime_type="application/x-mach-binary",
    extensions=("macho", "dylib"),
)

JAVA_CLASS = FileSignature(
    name="Java Class",
    pattern=b"\xca\xfe\xba\xbe",
    extension="class",
    mime_type="application/java-vm",
    extensions=("class",),
)

EXE = FileSignature(
    name="Windows Executable",
    pattern=b"MZ",
    extension="exe",
    mime_type="application/x-msdownload",
    extensions=("exe", "dll", "sys"),
)


SIGNATURES: Tuple[FileSignature, ...] = (
    # BOMs, longest first
    UTF32_LE_BOM,
    UTF32_BE_BOM,
    UTF8_BOM,
    UTF16_LE_BOM,
    UTF16_BE_BOM,
    # Documents
    PDF,
    RTF,
    COMPOUND_DOCUMENT,
    WORDPERFECT,
    # Markup
    XML,
    HTML_DOCTYPE,
    HTML_DOCTYPE_UPPER,
    HTML_DOCTYPE_LOWER,
    HTML_TAG,
    HTML_TAG_UPPER,
    # Containers
    ZIP,
    ZIP_EMPTY,
    ZIP_SPANNED,
    # Images
    PNG,
    JPEG,
    GIF89A,
    GIF87A,
    BMP,
    TIFF_BE,
    TIFF_LE,
    RIFF,
    # Audio
    MP3,
    FLAC,
    OGG,
    # Video
    MKV,
    FLV,
    MP4,
    # Archives
    RAR,
    SEVEN_ZIP,
    GZIP,
    BZIP2,
    XZ,
    # Executables
    ELF,
    MACHO,
    JAVA_CLASS,
    EXE,
)


__all__ = [
    "HEADER_LENGTH",
    "SIGNATURES",
    "PDF_MIME",
    "ZIP_MIME",
    "RTF_MIME",
    "MSWORD_MIME",
    "WORDPERFECT_MIME",
    "DOCX_MIME",
    "TEXT_MIME",
    "HTML_MIME",
    "XML_MIME",
]
