import os, sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import io
import logging
import json

import pytest
import responses

import main
from scraper.atcoder_scraper import AtCoderScraper
from utils.error_handler import NetworkError

TASK_HTML = """
<div class="part"><section><h3>Sample Input 1</h3><pre>3
5
</pre></section></div>
<div class="part"><section><h3>Sample Output 1</h3><pre>8
</pre></section></div>
"""


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv(main.CONFIG_ENV_VAR, str(tmp_path / "config.ini"))

    # main() reconfigures the root logger
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level
    yield tmp_path
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def run_main(monkeypatch, line):
    monkeypatch.setattr(sys, 'stdin', io.StringIO(line))
    main.main()


def test_read_contest_name_prompts():
    out = io.StringIO()
    assert main.read_contest_name(io.StringIO("  abc390 \n"), out) == "abc390"
    assert out.getvalue() == main.PROMPT


def test_read_contest_name_eof():
    with pytest.raises(EOFError):
        main.read_contest_name(io.StringIO(""), io.StringIO())


def test_main_writes_contest_json(workdir, monkeypatch, capsys):
    requested = []

    def fake_fetch(self, url):
        requested.append(url)
        return TASK_HTML

    monkeypatch.setattr(AtCoderScraper, 'fetch_page', fake_fetch)

    run_main(monkeypatch, "abc126\n")

    assert len(requested) == 6
    data = json.loads((workdir / "contest.json").read_text(encoding='utf-8'))
    assert data["kind"] == {"ABC": 126}
    assert [p["diff"] for p in data["problem"]] == list("abcdef")
    assert data["problem"][0]["expected_in_out"] == [["3\n5\n", "8\n"]]
    assert capsys.readouterr().out.startswith(main.PROMPT)


def test_main_bad_contest_name(workdir, monkeypatch, capsys):
    monkeypatch.setattr(AtCoderScraper, 'fetch_page',
                        lambda self, url: pytest.fail("no page should be fetched"))

    with pytest.raises(SystemExit) as excinfo:
        run_main(monkeypatch, "xyz1\n")

    assert excinfo.value.code == 1
    assert "parse error" in capsys.readouterr().err
    assert not (workdir / "contest.json").exists()


def test_main_fetch_failure_writes_nothing(workdir, monkeypatch, capsys):
    def fake_fetch(self, url):
        raise NetworkError(f"HTTP error 404 fetching {url}", url=url, status_code=404)

    monkeypatch.setattr(AtCoderScraper, 'fetch_page', fake_fetch)

    with pytest.raises(SystemExit) as excinfo:
        run_main(monkeypatch, "arc100\n")

    assert excinfo.value.code == 1
    assert "HTTP error 404" in capsys.readouterr().err
    assert not (workdir / "contest.json").exists()


def test_main_config_output_file(workdir, monkeypatch):
    (workdir / "config.ini").write_text(
        "[DEFAULT]\nlog_level = DEBUG\n\n[Paths]\noutput_file = samples.json\n",
        encoding='utf-8',
    )
    monkeypatch.setattr(AtCoderScraper, 'fetch_page', lambda self, url: TASK_HTML)

    run_main(monkeypatch, "agc002\n")

    data = json.loads((workdir / "samples.json").read_text(encoding='utf-8'))
    assert data["kind"] == {"AGC": 2}
    assert [p["diff"] for p in data["problem"]] == ["AGC0", "AGC1"]


def test_main_eof(workdir, monkeypatch):
    with pytest.raises(SystemExit) as excinfo:
        run_main(monkeypatch, "")
    assert excinfo.value.code == 1


@responses.activate
def test_main_reports_fetch_failure_once(workdir, monkeypatch, capsys):
    responses.add(responses.GET, "https://atcoder.jp/contests/abc200/tasks/abc200_a",
                  body="Not Found", status=404)

    with pytest.raises(SystemExit) as excinfo:
        run_main(monkeypatch, "abc200\n")

    assert excinfo.value.code == 1
    assert capsys.readouterr().err.count("HTTP error 404") == 1
    assert not (workdir / "contest.json").exists()
