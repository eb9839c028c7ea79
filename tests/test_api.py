"""Tests for the public collect_stats API."""

import pytest

from filestats import collect_stats
from filestats.exceptions import InvalidPathError


@pytest.fixture(autouse=True)
def _no_config(tmp_path, monkeypatch):
    home = tmp_path / "_home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)


class TestCollectStats:
    def test_end_to_end(self, sample_tree):
        result = collect_stats(str(sample_tree), workers=2)
        assert list(result.records) == ["JAVA", "SH", "TXT"]
        assert result.records["JAVA"].lines == 20
        assert result.records["JAVA"].comment_lines == 4
        assert result.files_discovered == 4
        assert result.files_scanned == 4
        assert result.files_failed == []
        assert result.workers == 2

    def test_worker_count_does_not_change_result(self, nested_tree):
        one = collect_stats(str(nested_tree), recursive=True, workers=1)
        many = collect_stats(str(nested_tree), recursive=True, workers=7)
        assert one.records == many.records

    def test_include_filter(self, sample_tree):
        result = collect_stats(str(sample_tree), include_extensions=["sh"])
        assert list(result.records) == ["SH"]

    def test_unreadable_file_reported(self, sample_tree):
        (sample_tree / "bad.txt").write_bytes(b"\xff\xff")
        result = collect_stats(str(sample_tree))
        assert result.files_discovered == 5
        assert result.files_scanned == 4
        assert result.files_failed == [str(sample_tree / "bad.txt")]

    def test_missing_path(self, tmp_path):
        with pytest.raises(InvalidPathError):
            collect_stats(str(tmp_path / "nope"))

    def test_to_dict(self, sample_tree):
        data = collect_stats(str(sample_tree)).to_dict()
        assert [r["type"] for r in data["records"]] == ["JAVA", "SH", "TXT"]

    def test_max_depth_ignored_without_recursive(self, nested_tree):
        result = collect_stats(str(nested_tree), recursive=False, max_depth=5)
        assert set(result.records) == {"PY", ""}
        assert result.files_discovered == 2

    def test_discovery_gets_effective_depth(self, nested_tree, monkeypatch):
        seen = {}

        def fake_discover(root, **kwargs):
            seen.update(kwargs)
            return []

        monkeypatch.setattr("filestats.api.discover_files", fake_discover)
        collect_stats(str(nested_tree), recursive=False, max_depth=5)
        assert seen["max_depth"] == 1
        collect_stats(str(nested_tree), recursive=True, max_depth=5)
        assert seen["max_depth"] == 5
