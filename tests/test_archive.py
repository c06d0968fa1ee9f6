"""Tests for deterministic archive creation"""

import os
import zipfile
from pathlib import Path

import pytest

from lambda_deploy.core import ZipArchiver


@pytest.fixture
def package_dir(tmp_path):
    root = tmp_path / "package"
    (root / "shared").mkdir(parents=True)
    (root / "lambda_function.py").write_text("def lambda_handler(e, c):\n    return e\n")
    (root / "shared" / "db.py").write_text("URL = 'postgres://'\n")
    (root / "__pycache__").mkdir()
    (root / "__pycache__" / "lambda_function.cpython-311.pyc").write_bytes(b"\x00\x01")
    (root / "stale.pyc").write_bytes(b"\x00")
    (root / ".gitignore").write_text("*.pyc\n")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (root / ".DS_Store").write_bytes(b"\x00")
    return root


class TestZipArchiver:

    def test_transient_files_excluded(self, package_dir, tmp_path):
        stats = ZipArchiver().build(package_dir, tmp_path / "out.zip")

        with zipfile.ZipFile(stats.path) as zf:
            names = zf.namelist()

        assert names == ["lambda_function.py", "shared/db.py"]
        assert stats.file_count == 2

    def test_entries_have_fixed_timestamp(self, package_dir, tmp_path):
        stats = ZipArchiver().build(package_dir, tmp_path / "out.zip")

        with zipfile.ZipFile(stats.path) as zf:
            assert {info.date_time for info in zf.infolist()} == {(1980, 1, 1, 0, 0, 0)}

    def test_identical_inputs_give_identical_bytes(self, package_dir, tmp_path):
        archiver = ZipArchiver()
        first = archiver.build(package_dir, tmp_path / "first.zip")

        # Touch every file so only modification times differ
        for path in package_dir.rglob("*"):
            if path.is_file():
                os.utime(path, (1_700_000_000, 1_700_000_000))
        second = archiver.build(package_dir, tmp_path / "second.zip")

        assert first.path.read_bytes() == second.path.read_bytes()
        assert first.checksum == second.checksum

    def test_existing_archive_replaced(self, package_dir, tmp_path):
        output = tmp_path / "out.zip"
        output.write_bytes(b"not a zip")

        ZipArchiver().build(package_dir, output)

        assert zipfile.is_zipfile(output)

    def test_executable_bit_preserved(self, package_dir, tmp_path):
        script = package_dir / "bootstrap"
        script.write_text("#!/bin/sh\n")
        script.chmod(0o775)

        stats = ZipArchiver().build(package_dir, tmp_path / "out.zip")

        with zipfile.ZipFile(stats.path) as zf:
            mode = (zf.getinfo("bootstrap").external_attr >> 16) & 0o777
        assert mode == 0o755

    def test_custom_exclude_patterns(self):
        archiver = ZipArchiver(exclude_patterns=["shared"])

        assert archiver.is_excluded(Path("shared") / "db.py")
        assert not archiver.is_excluded(Path("lambda_function.py"))

    def test_missing_source_directory(self, tmp_path):
        with pytest.raises(NotADirectoryError):
            ZipArchiver().build(tmp_path / "missing", tmp_path / "out.zip")
