"""Drive document types, file extensions and the MIME types that go with them."""

from __future__ import annotations

import os
from collections.abc import Mapping
from enum import Enum
from pathlib import PurePath
from typing import Any

MIME_TYPE_DRIVE_FOLDER = "application/vnd.google-apps.folder"
MIME_TYPE_DRIVE_DOCUMENT = "application/vnd.google-apps.document"
MIME_TYPE_DRIVE_SHORTCUT = "application/vnd.google-apps.shortcut"
MIME_TYPE_DRIVE_SPREADSHEET = "application/vnd.google-apps.spreadsheet"
MIME_TYPE_DRIVE_PRESENTATION = "application/vnd.google-apps.presentation"

EXTENSION_DOC = "doc"
EXTENSION_DOCX = "docx"
EXTENSION_ODT = "odt"
EXTENSION_JPG = "jpg"
EXTENSION_JPEG = "jpeg"
EXTENSION_GIF = "gif"
EXTENSION_PNG = "png"
EXTENSION_RTF = "rtf"
EXTENSION_PDF = "pdf"
EXTENSION_HTML = "html"
EXTENSION_XLS = "xls"
EXTENSION_XLSX = "xlsx"
EXTENSION_CSV = "csv"
EXTENSION_TSV = "tsv"
EXTENSION_ODS = "ods"
EXTENSION_PPT = "ppt"
EXTENSION_PPTX = "pptx"
EXTENSION_ODP = "odp"
EXTENSION_EPUB = "epub"
EXTENSION_TXT = "txt"

MIME_TYPE_DOC = "application/msword"
MIME_TYPE_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MIME_TYPE_ODT = "application/vnd.oasis.opendocument.text"
MIME_TYPE_JPG = "image/jpeg"
MIME_TYPE_JPEG = "image/jpeg"
MIME_TYPE_GIF = "image/gif"
MIME_TYPE_PNG = "image/png"
MIME_TYPE_RTF = "application/rtf"
MIME_TYPE_PDF = "application/pdf"
MIME_TYPE_HTML = "text/html"
MIME_TYPE_XLS = "application/vnd.ms-excel"
MIME_TYPE_XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
MIME_TYPE_CSV = "text/csv"
MIME_TYPE_TSV = "text/tab-separated-values"
MIME_TYPE_ODS = "application/vnd.oasis.opendocument.spreadsheet"
MIME_TYPE_PPT = "application/vnd.ms-powerpoint"
MIME_TYPE_PPTX = "application/vnd.openxmlformats-officedocument.presentationml.presentation"
MIME_TYPE_ODP = "application/vnd.oasis.opendocument.presentation"
MIME_TYPE_EPUB = "application/epub+zip"
MIME_TYPE_TXT = "text/plain"


class FileExtension(Enum):
    """File extensions known for importing and exporting documents."""

    DOC = EXTENSION_DOC
    DOCX = EXTENSION_DOCX
    ODT = EXTENSION_ODT
    JPG = EXTENSION_JPG
    JPEG = EXTENSION_JPEG
    GIF = EXTENSION_GIF
    PNG = EXTENSION_PNG
    RTF = EXTENSION_RTF
    PDF = EXTENSION_PDF
    HTML = EXTENSION_HTML
    XLS = EXTENSION_XLS
    XLSX = EXTENSION_XLSX
    CSV = EXTENSION_CSV
    TSV = EXTENSION_TSV
    ODS = EXTENSION_ODS
    PPT = EXTENSION_PPT
    PPTX = EXTENSION_PPTX
    ODP = EXTENSION_ODP
    EPUB = EXTENSION_EPUB
    TXT = EXTENSION_TXT

    @staticmethod
    def from_path(path: os.PathLike | str) -> FileExtension | None:
        """The known extension of a path, or None (matching is case sensitive)."""
        suffix = PurePath(path).suffix
        if not suffix:
            return None
        try:
            return FileExtension(suffix[1:])
        except ValueError:
            return None

    def export_mime(self) -> str:
        """MIME type to request when exporting to this extension."""
        return _EXPORT_MIME[self]

    def __str__(self) -> str:
        return self.value


_EXPORT_MIME = {
    FileExtension.DOC: MIME_TYPE_DOC,
    FileExtension.DOCX: MIME_TYPE_DOCX,
    FileExtension.ODT: MIME_TYPE_ODT,
    FileExtension.JPG: MIME_TYPE_JPG,
    FileExtension.JPEG: MIME_TYPE_JPEG,
    FileExtension.GIF: MIME_TYPE_GIF,
    FileExtension.PNG: MIME_TYPE_PNG,
    FileExtension.RTF: MIME_TYPE_RTF,
    FileExtension.PDF: MIME_TYPE_PDF,
    FileExtension.HTML: MIME_TYPE_HTML,
    FileExtension.XLS: MIME_TYPE_XLS,
    FileExtension.XLSX: MIME_TYPE_XLSX,
    FileExtension.CSV: MIME_TYPE_CSV,
    FileExtension.TSV: MIME_TYPE_TSV,
    FileExtension.ODS: MIME_TYPE_ODS,
    FileExtension.PPT: MIME_TYPE_PPT,
    FileExtension.PPTX: MIME_TYPE_PPTX,
    FileExtension.ODP: MIME_TYPE_ODP,
    FileExtension.EPUB: MIME_TYPE_EPUB,
    FileExtension.TXT: MIME_TYPE_TXT,
}


class DocType(Enum):
    """Kinds of native Drive documents."""

    DOCUMENT = "document"
    SPREADSHEET = "spreadsheet"
    PRESENTATION = "presentation"

    @staticmethod
    def from_file_path(path: os.PathLike | str) -> DocType | None:
        """The document type a local file is imported as, if any."""
        extension = FileExtension.from_path(path)
        if extension is None:
            return None
        return next(
            (doc_type for ext, doc_type in _IMPORT_EXTENSION_MAP if ext is extension),
            None,
        )

    @staticmethod
    def from_mime_type(mime: str) -> DocType | None:
        return _DRIVE_MIME_TO_DOC_TYPE.get(mime)

    @staticmethod
    def supported_import_types() -> list[str]:
        return [str(ext) for ext, _ in _IMPORT_EXTENSION_MAP]

    def default_export_type(self) -> FileExtension:
        if self is DocType.SPREADSHEET:
            return FileExtension.CSV
        return FileExtension.PDF

    def can_export_to(self, extension: FileExtension) -> bool:
        return extension in self.supported_export_types()

    def supported_export_types(self) -> list[FileExtension]:
        return list(_EXPORT_TYPES[self])

    def mime(self) -> str:
        """The Drive MIME type of this document type."""
        return _DOC_TYPE_TO_DRIVE_MIME[self]

    def __str__(self) -> str:
        return self.value


_IMPORT_EXTENSION_MAP: tuple[tuple[FileExtension, DocType], ...] = (
    (FileExtension.DOC, DocType.DOCUMENT),
    (FileExtension.DOCX, DocType.DOCUMENT),
    (FileExtension.ODT, DocType.DOCUMENT),
    (FileExtension.JPG, DocType.DOCUMENT),
    (FileExtension.JPEG, DocType.DOCUMENT),
    (FileExtension.GIF, DocType.DOCUMENT),
    (FileExtension.PNG, DocType.DOCUMENT),
    (FileExtension.RTF, DocType.DOCUMENT),
    (FileExtension.PDF, DocType.DOCUMENT),
    (FileExtension.HTML, DocType.DOCUMENT),
    (FileExtension.XLS, DocType.SPREADSHEET),
    (FileExtension.XLSX, DocType.SPREADSHEET),
    (FileExtension.CSV, DocType.SPREADSHEET),
    (FileExtension.TSV, DocType.SPREADSHEET),
    (FileExtension.ODS, DocType.SPREADSHEET),
    (FileExtension.PPT, DocType.PRESENTATION),
    (FileExtension.PPTX, DocType.PRESENTATION),
    (FileExtension.ODP, DocType.PRESENTATION),
)

_EXPORT_TYPES: dict[DocType, tuple[FileExtension, ...]] = {
    DocType.DOCUMENT: (
        FileExtension.PDF,
        FileExtension.ODT,
        FileExtension.DOCX,
        FileExtension.EPUB,
        FileExtension.RTF,
        FileExtension.TXT,
        FileExtension.HTML,
    ),
    DocType.SPREADSHEET: (
        FileExtension.CSV,
        FileExtension.TSV,
        FileExtension.ODS,
        FileExtension.XLSX,
        FileExtension.PDF,
    ),
    DocType.PRESENTATION: (
        FileExtension.PDF,
        FileExtension.PPTX,
        FileExtension.ODP,
        FileExtension.TXT,
    ),
}

_DOC_TYPE_TO_DRIVE_MIME = {
    DocType.DOCUMENT: MIME_TYPE_DRIVE_DOCUMENT,
    DocType.SPREADSHEET: MIME_TYPE_DRIVE_SPREADSHEET,
    DocType.PRESENTATION: MIME_TYPE_DRIVE_PRESENTATION,
}

_DRIVE_MIME_TO_DOC_TYPE = {mime: doc for doc, mime in _DOC_TYPE_TO_DRIVE_MIME.items()}


def is_directory(file: Mapping[str, Any]) -> bool:
    """True if a Drive file resource is a folder."""
    return file.get("mimeType") == MIME_TYPE_DRIVE_FOLDER


def is_binary(file: Mapping[str, Any]) -> bool:
    """True if a Drive file resource has stored content (it carries a checksum)."""
    return file.get("md5Checksum") is not None


def is_shortcut(file: Mapping[str, Any]) -> bool:
    """True if a Drive file resource is a shortcut."""
    return file.get("mimeType") == MIME_TYPE_DRIVE_SHORTCUT