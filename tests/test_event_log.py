# tests/test_event_log.py
import json

from emoji_picker.core.event_log import EventLog, default_path_provider
from emoji_picker.core.models import KeystrokeEvent, SelectEvent, Selection
from emoji_picker.utils.logger_utils import Log

from conftest import app_log_at


def _records(path):
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]


def test_append_writes_one_json_line_per_event(event_log, log_path):
    event_log.append(KeystrokeEvent(ts=10, key="g"))
    event_log.append(SelectEvent(ts=11, code="1f600", query="Gr"))
    assert _records(log_path) == [
        {"type": "keystroke", "ts": 10, "key": "g"},
        {"type": "select", "ts": 11, "code": "1f600", "query": "Gr"},
    ]


def test_append_creates_missing_parent_directory(tmp_path):
    path = tmp_path / "nested" / "dir" / "log.jsonl"
    EventLog(lambda: path).log_keystroke("a", ts=1)
    assert path.exists()


def test_load_returns_only_selections_lowercased(event_log):
    event_log.log_keystroke("G", ts=1)
    event_log.log_select("1f600", "GR", ts=2)
    event_log.log_keystroke("backspace", ts=3)
    event_log.log_select("1f622", "cry", ts=4)
    assert event_log.load_selections() == [
        Selection(code="1f600", query="gr", ts=2),
        Selection(code="1f622", query="cry", ts=4),
    ]


def test_malformed_lines_are_skipped(event_log, log_path):
    event_log.log_select("1f600", "gr", ts=2)
    with open(log_path, "a", encoding="utf-8") as fh:
        fh.write("not json at all\n")
        fh.write('{"type": "select", "ts": "yesterday", "code": "x", "query": ""}\n')
        fh.write('{"type": "select", "ts": -5, "code": "x", "query": ""}\n')
        fh.write('{"type": "select", "ts": 3, "code": 42, "query": ""}\n')
        fh.write('{"type": "mystery", "ts": 3}\n')
        fh.write("[1, 2, 3]\n")
        fh.write("\n")
        fh.write('{"type": "select", "ts": 5, "code": "1f622", "query": "Cr"}\n')
    sels = event_log.load_selections()
    assert [s.code for s in sels] == ["1f600", "1f622"]
    assert sels[1].query == "cr"


def test_missing_file_loads_empty(event_log):
    assert event_log.load_selections() == []


def test_no_home_makes_everything_a_noop():
    log = EventLog(lambda: None)
    log.log_keystroke("a")
    log.log_select("1f600", "gr")
    assert log.load_selections() == []


def test_io_failures_are_swallowed(tmp_path):
    # a directory where the file should be: open() fails both ways
    log = EventLog(lambda: tmp_path)
    log.log_select("1f600", "gr", ts=1)
    assert log.load_selections() == []


def test_broken_path_provider_means_no_history():
    def provider():
        raise RuntimeError("no home")

    log = EventLog(provider)
    log.log_keystroke("a")
    assert log.load_selections() == []


def test_log_select_stamps_current_time(event_log):
    event = event_log.log_select("1f600", "gr")
    assert event.ts > 1_600_000_000
    assert event_log.load_selections()[0].ts == event.ts


def test_default_path_lives_in_home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    assert default_path_provider() == tmp_path / "emoji_picker_strokes.jsonl"


def test_default_path_follows_shared_home_lookup(tmp_path, monkeypatch):
    # "~" is what an unresolvable home looks like; it must not become a relative path
    monkeypatch.setattr("emoji_picker.core.event_log.home_dir", lambda: None)
    monkeypatch.chdir(tmp_path)
    log = EventLog()
    log.log_select("1f600", "gr", ts=1)
    assert log.load_selections() == []
    assert list(tmp_path.rglob("*.jsonl")) == []


def test_app_log_redirect_restores_previous_target(tmp_path):
    before = (Log.path, Log.enabled)
    with app_log_at(tmp_path / "inner"):
        assert Log.path == str(tmp_path / "inner" / "emoji_picker.log")
        Log.configure(enabled=False)
    assert (Log.path, Log.enabled) == before
