import pytest

from gdrivecli.drive_file import (
    MIME_TYPE_CSV,
    MIME_TYPE_DOCX,
    MIME_TYPE_DRIVE_DOCUMENT,
    MIME_TYPE_DRIVE_FOLDER,
    MIME_TYPE_DRIVE_PRESENTATION,
    MIME_TYPE_DRIVE_SHORTCUT,
    MIME_TYPE_DRIVE_SPREADSHEET,
    MIME_TYPE_JPEG,
    MIME_TYPE_JPG,
    DocType,
    FileExtension,
    is_binary,
    is_directory,
    is_shortcut,
)


@pytest.mark.parametrize(
    "path, expected",
    [
        ("report.docx", DocType.DOCUMENT),
        ("photo.png", DocType.DOCUMENT),
        ("dir/sheet.xlsx", DocType.SPREADSHEET),
        ("data.tsv", DocType.SPREADSHEET),
        ("slides.odp", DocType.PRESENTATION),
        ("notes.txt", None),
        ("book.epub", None),
        ("archive.tar", None),
        ("noextension", None),
        ("REPORT.DOCX", None),
    ],
)
def test_doc_type_from_file_path(path, expected):
    assert DocType.from_file_path(path) is expected


def test_doc_type_from_mime_type():
    assert DocType.from_mime_type(MIME_TYPE_DRIVE_DOCUMENT) is DocType.DOCUMENT
    assert DocType.from_mime_type(MIME_TYPE_DRIVE_SPREADSHEET) is DocType.SPREADSHEET
    assert DocType.from_mime_type(MIME_TYPE_DRIVE_PRESENTATION) is DocType.PRESENTATION
    assert DocType.from_mime_type(MIME_TYPE_DRIVE_FOLDER) is None


@pytest.mark.parametrize("doc_type", list(DocType))
def test_mime_round_trip(doc_type):
    assert DocType.from_mime_type(doc_type.mime()) is doc_type


def test_supported_import_types_order():
    types = DocType.supported_import_types()
    assert types[:3] == ["doc", "docx", "odt"]
    assert types[-1] == "odp"
    assert len(types) == len(set(types))
    for name in types:
        assert DocType.from_file_path(f"file.{name}") is not None


def test_default_export_types():
    assert DocType.DOCUMENT.default_export_type() is FileExtension.PDF
    assert DocType.SPREADSHEET.default_export_type() is FileExtension.CSV
    assert DocType.PRESENTATION.default_export_type() is FileExtension.PDF


@pytest.mark.parametrize(
    "mime",
    [MIME_TYPE_DRIVE_DOCUMENT, MIME_TYPE_DRIVE_SPREADSHEET, MIME_TYPE_DRIVE_PRESENTATION],
)
def test_default_export_type_is_supported(mime):
    doc_type = DocType.from_mime_type(mime)
    assert doc_type.can_export_to(doc_type.default_export_type())


def test_can_export_to():
    assert DocType.DOCUMENT.can_export_to(FileExtension.EPUB)
    assert not DocType.DOCUMENT.can_export_to(FileExtension.CSV)
    assert DocType.SPREADSHEET.can_export_to(FileExtension.XLSX)
    assert not DocType.PRESENTATION.can_export_to(FileExtension.DOCX)


def test_supported_export_types_returns_copy():
    types = DocType.PRESENTATION.supported_export_types()
    types.clear()
    assert DocType.PRESENTATION.supported_export_types()[0] is FileExtension.PDF


def test_doc_type_str():
    assert str(DocType.from_file_path("sheet.csv")) == "spreadsheet"
    assert str(DocType.from_mime_type(MIME_TYPE_DRIVE_DOCUMENT)) == "document"


@pytest.mark.parametrize("extension", list(FileExtension))
def test_file_extension_round_trip(extension):
    assert FileExtension.from_path(f"some/file.{extension}") is extension


def test_file_extension_from_path_unknown():
    assert FileExtension.from_path("file.zip") is None
    assert FileExtension.from_path(".bashrc") is None


def test_export_mime():
    assert FileExtension.DOCX.export_mime() == MIME_TYPE_DOCX
    assert FileExtension.CSV.export_mime() == MIME_TYPE_CSV
    assert FileExtension.JPG.export_mime() == MIME_TYPE_JPG
    assert FileExtension.JPEG.export_mime() == MIME_TYPE_JPEG


def test_is_directory_and_shortcut():
    folder = {"mimeType": MIME_TYPE_DRIVE_FOLDER}
    shortcut = {"mimeType": MIME_TYPE_DRIVE_SHORTCUT}
    assert is_directory(folder)
    assert not is_shortcut(folder)
    assert is_shortcut(shortcut)
    assert not is_directory(shortcut)
    assert not is_directory({})


def test_is_binary():
    assert is_binary({"md5Checksum": "d41d8cd98f00b204e9800998ecf8427e"})
    assert not is_binary({"mimeType": MIME_TYPE_DRIVE_DOCUMENT})