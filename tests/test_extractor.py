"""
Test extracting the bundled xpi
"""
import zipfile

import pytest

from jserrorcollector import ExtractionException, PackagingException, XpiExtractor


@pytest.fixture
def write_calls(monkeypatch):
    """Count real writes done by XpiExtractor"""
    calls = []
    original = XpiExtractor._write

    def counting_write(data, target):
        calls.append(target)
        original(data, target)

    monkeypatch.setattr(XpiExtractor, "_write", staticmethod(counting_write))
    return calls


def test_embedded_archive_is_an_extension(extractor):
    """The packaged resource is a zip with a manifest"""
    path = extractor.extract()
    with zipfile.ZipFile(path) as zf:
        names = zf.namelist()
    assert "manifest.json" in names


def test_extract_writes_fixed_filename(extractor, tmp_path):
    path = extractor.extract()
    assert path == tmp_path / "JSErrorCollector.xpi"
    assert path.is_absolute()
    assert path.read_bytes() == extractor.read_embedded()


def test_extract_twice_writes_once(tmp_path, write_calls):
    """A second extractor finds the identical file and skips the write"""
    first = XpiExtractor(temp_dir=tmp_path).extract()
    second = XpiExtractor(temp_dir=tmp_path).extract()
    assert first == second
    assert len(write_calls) == 1


def test_extract_again_skips_identical_file(extractor, write_calls):
    assert extractor.extract() == extractor.extract()
    assert len(write_calls) == 1


def test_corrupted_file_is_rewritten(tmp_path, write_calls):
    path = XpiExtractor(temp_dir=tmp_path).extract()
    embedded = path.read_bytes()
    path.write_bytes(embedded[:10])

    again = XpiExtractor(temp_dir=tmp_path).extract()
    assert again.read_bytes() == embedded
    assert len(write_calls) == 2


def test_same_extractor_repairs_truncated_file(extractor, write_calls):
    path = extractor.extract()
    path.write_bytes(b"")
    assert not extractor.is_current()

    extractor.extract()
    assert extractor.is_current()
    assert len(write_calls) == 2


def test_missing_resource_raises_packaging_error(tmp_path):
    extractor = XpiExtractor(temp_dir=tmp_path, resource="missing.xpi")
    with pytest.raises(PackagingException) as exc_info:
        extractor.extract()
    assert "missing.xpi" in exc_info.value.message


def test_unwritable_target_raises_extraction_error(tmp_path):
    # a regular file where the directory should be
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    extractor = XpiExtractor(temp_dir=blocker / "sub")
    with pytest.raises(ExtractionException) as exc_info:
        extractor.extract()
    assert exc_info.value.path == str(blocker / "sub" / "JSErrorCollector.xpi")
    assert isinstance(exc_info.value.__cause__, OSError)


def test_default_temp_dir_comes_from_settings(monkeypatch, tmp_path):
    from jserrorcollector.core.config import settings

    monkeypatch.setattr(settings, "TEMP_DIR", str(tmp_path))
    assert XpiExtractor().path == tmp_path / "JSErrorCollector.xpi"
