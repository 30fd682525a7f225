import io
import json
import tarfile

import pytest

from gdrivecli.account_archive import ArchiveError, create, get_account_name, unpack


@pytest.fixture
def account_dir(tmp_path):
    path = tmp_path / "config" / "alice@example.com"
    path.mkdir(parents=True)
    (path / "secret.json").write_text(json.dumps({"client_secret": "secret"}))
    (path / "tokens.json").write_text(json.dumps({"token": "token"}))
    return path


def _write_tar(path, entries):
    with tarfile.open(path, "w") as tar:
        for name, content in entries:
            info = tarfile.TarInfo(name)
            if content is None:
                info.type = tarfile.DIRTYPE
                info.mode = 0o755
                tar.addfile(info)
            else:
                info.size = len(content)
                tar.addfile(info, io.BytesIO(content))


def test_create_and_read_name(account_dir, tmp_path):
    archive = tmp_path / "export.tar"
    create(account_dir, archive)
    assert archive.is_file()
    assert get_account_name(archive) == account_dir.name


def test_round_trip_unpack(account_dir, tmp_path):
    archive = tmp_path / "export.tar"
    create(account_dir, archive)
    dst = tmp_path / "restore"
    dst.mkdir()
    unpack(archive, dst)
    restored = dst / account_dir.name
    assert sorted(p.name for p in restored.iterdir()) == ["secret.json", "tokens.json"]
    assert (restored / "tokens.json").read_text() == (account_dir / "tokens.json").read_text()


def test_create_missing_source(tmp_path):
    with pytest.raises(ArchiveError, match="does not exist"):
        create(tmp_path / "missing", tmp_path / "out.tar")


def test_create_source_not_dir(tmp_path):
    src = tmp_path / "file.txt"
    src.write_text("data")
    with pytest.raises(ArchiveError, match="is not a directory"):
        create(src, tmp_path / "out.tar")


def test_create_archive_exists(account_dir, tmp_path):
    archive = tmp_path / "out.tar"
    archive.write_bytes(b"")
    with pytest.raises(ArchiveError, match="already exists"):
        create(account_dir, archive)
    assert archive.read_bytes() == b""


def test_name_with_multiple_directories(tmp_path):
    archive = tmp_path / "multi.tar"
    _write_tar(archive, [("first", None), ("second", None)])
    with pytest.raises(ArchiveError, match="multiple directories"):
        get_account_name(archive)


def test_name_with_no_directories(tmp_path):
    archive = tmp_path / "flat.tar"
    _write_tar(archive, [("loose.txt", b"data")])
    with pytest.raises(ArchiveError, match="no directories"):
        get_account_name(archive)


def test_name_of_missing_archive(tmp_path):
    with pytest.raises(ArchiveError, match="Failed to open archive"):
        get_account_name(tmp_path / "missing.tar")


def test_name_of_invalid_archive(tmp_path):
    archive = tmp_path / "bad.tar"
    archive.write_bytes(b"this is not a tar archive at all" * 40)
    with pytest.raises(ArchiveError, match="Failed to read archive entries"):
        get_account_name(archive)


def test_unpack_missing_destination(account_dir, tmp_path):
    archive = tmp_path / "export.tar"
    create(account_dir, archive)
    with pytest.raises(ArchiveError, match="does not exist"):
        unpack(archive, tmp_path / "nowhere")


def test_unpack_skips_parent_entries(tmp_path):
    archive = tmp_path / "evil.tar"
    _write_tar(archive, [("acct", None), ("acct/ok.txt", b"ok"), ("../evil.txt", b"bad")])
    dst = tmp_path / "dst"
    dst.mkdir()
    unpack(archive, dst)
    assert (dst / "acct" / "ok.txt").read_bytes() == b"ok"
    assert not (tmp_path / "evil.txt").exists()