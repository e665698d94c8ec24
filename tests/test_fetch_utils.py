from pathlib import Path

from fetch import _fetch_utils, fetch_noaa_storm_events
from fetch._fetch_utils import download_file, filename_from_url, get_url_for_tag
from fetch.fetch_noaa_storm_events import STORM_DATA_URL, cli, resolve_storm_data_url

STORM_URL = "https://d396qusza40orc.cloudfront.net/repdata%2Fdata%2FStormData.csv.bz2"


def test_filename_from_encoded_url():
    assert filename_from_url(STORM_URL) == "StormData.csv.bz2"


def test_filename_fallback_for_bare_host():
    assert filename_from_url("https://example.org/").startswith("download_")


def test_get_url_for_tag_reads_sources_file(tmp_path):
    sources = tmp_path / "dataset_sources.txt"
    sources.write_text(f"# comment\n\nhttps://example.org/other.csv\n{STORM_URL}\n", encoding="utf-8")

    assert get_url_for_tag("noaa_storm_events", sources) == STORM_URL


def test_get_url_for_tag_without_match(tmp_path):
    sources = tmp_path / "dataset_sources.txt"
    sources.write_text("https://example.org/other.csv\n", encoding="utf-8")

    assert get_url_for_tag("noaa_storm_events", sources) is None
    assert get_url_for_tag("not_a_tag", sources) is None
    assert get_url_for_tag("noaa_storm_events", tmp_path / "missing.txt") is None


def test_download_skips_existing_file(tmp_path, monkeypatch):
    dest = tmp_path / "StormData.csv.bz2"
    dest.write_bytes(b"cached")
    monkeypatch.setattr(_fetch_utils, "urlretrieve", lambda *a: (_ for _ in ()).throw(AssertionError))

    assert download_file(STORM_URL, dest) == dest
    assert dest.read_bytes() == b"cached"


def test_download_writes_file(tmp_path, monkeypatch):
    def fake_retrieve(url, path):
        Path(path).write_bytes(b"payload")

    monkeypatch.setattr(_fetch_utils, "urlretrieve", fake_retrieve)
    dest = tmp_path / "raw" / "StormData.csv.bz2"

    assert download_file(STORM_URL, dest) == dest
    assert dest.read_bytes() == b"payload"


def test_download_failure_returns_none(tmp_path, monkeypatch):
    def failing_retrieve(url, path):
        Path(path).write_bytes(b"partial")
        raise OSError("connection reset")

    monkeypatch.setattr(_fetch_utils, "urlretrieve", failing_retrieve)
    dest = tmp_path / "StormData.csv.bz2"

    assert download_file(STORM_URL, dest) is None
    assert not dest.exists()
    assert not dest.with_name(dest.name + ".part").exists()


# ---------------------------------------------------------------------------
# fetch_noaa_storm_events
# ---------------------------------------------------------------------------

def test_default_url_when_not_configured(monkeypatch):
    monkeypatch.setattr(fetch_noaa_storm_events, "get_url_for_tag", lambda tag: None)
    assert resolve_storm_data_url() == STORM_DATA_URL


def test_configured_url_wins(monkeypatch):
    monkeypatch.setattr(fetch_noaa_storm_events, "get_url_for_tag",
                        lambda tag: "https://mirror.example.org/StormData.csv.bz2")
    assert resolve_storm_data_url() == "https://mirror.example.org/StormData.csv.bz2"


def test_main_returns_none_when_download_fails(tmp_path, monkeypatch):
    calls = []

    def failing_download(url, dest_path, force=False):
        calls.append((url, dest_path, force))
        return None

    monkeypatch.setattr(fetch_noaa_storm_events, "get_url_for_tag", lambda tag: None)
    monkeypatch.setattr(fetch_noaa_storm_events, "download_file", failing_download)
    dest = tmp_path / "StormData.csv.bz2"

    assert fetch_noaa_storm_events.main(dest_path=dest) is None
    assert calls == [(STORM_DATA_URL, dest, False)]


def test_cli_exit_status(monkeypatch):
    forced = []

    def fake_main(force=False):
        forced.append(force)
        return None if force else Path("StormData.csv.bz2")

    monkeypatch.setattr(fetch_noaa_storm_events, "main", fake_main)

    assert cli([]) == 0
    assert cli(["--force"]) == 1
    assert forced == [False, True]
