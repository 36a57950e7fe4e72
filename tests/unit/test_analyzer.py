from __future__ import annotations

import asyncio
import textwrap
from pathlib import Path

import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from emlanalyzer.analyzer import EmlAnalyzer
from emlanalyzer.config import AnalyzerOptions, ConfigError
from emlanalyzer.message import MessageParseError

REMOTE_IMAGE = textwrap.dedent(
    """
    From: News <news@letters.example.co.uk>
    Subject: Weekly digest
    MIME-Version: 1.0
    Content-Type: text/html; charset="utf-8"

    <table><tr><td><img src="https://cdn.example.com/hero.jpg"></td></tr></table>
    """
).lstrip()


class FakeProbe:
    def __init__(self, size: int, errors: dict[str, Exception] | None = None) -> None:
        self.size = size
        self.errors = errors or {}
        self.calls: list[str] = []

    async def probe(self, url: str) -> int:
        self.calls.append(url)
        if url in self.errors:
            raise self.errors[url]
        return self.size


def _write(tmp_path: Path, name: str, contents: str = REMOTE_IMAGE) -> Path:
    path = tmp_path / name
    path.write_text(contents, encoding="utf-8")
    return path


def test_rejects_unsupported_extension(tmp_path):
    path = _write(tmp_path, "digest.msg")

    with pytest.raises(ConfigError, match="Only .eml files are supported. .msg given"):
        EmlAnalyzer(path)


def test_extension_check_is_case_insensitive(tmp_path):
    path = _write(tmp_path, "digest.EML")

    analyzer = EmlAnalyzer(path)

    assert analyzer.message.subject == "Weekly digest"


def test_unparsable_message_raises(tmp_path):
    path = tmp_path / "empty.eml"
    path.write_bytes(b"")

    with pytest.raises(MessageParseError):
        EmlAnalyzer(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(MessageParseError):
        EmlAnalyzer(tmp_path / "absent.eml")


def test_run_may_only_be_called_once(tmp_path):
    analyzer = EmlAnalyzer(_write(tmp_path, "digest.eml"))
    asyncio.run(analyzer.run())

    with pytest.raises(RuntimeError):
        asyncio.run(analyzer.run())


def test_probe_is_unused_when_size_fetching_disabled(tmp_path):
    probe = FakeProbe(512)
    analyzer = EmlAnalyzer(_write(tmp_path, "digest.eml"), probe=probe)

    asyncio.run(analyzer.run())

    assert probe.calls == []
    assets = analyzer.report.external_assets
    assert assets.image_count == 1
    assert assets.formats == [".jpg"]
    assert assets.sizes == []


def test_injected_probe_measures_remote_assets(tmp_path):
    probe = FakeProbe(512)
    options = AnalyzerOptions(fetch_external_assets_size=True)
    analyzer = EmlAnalyzer(_write(tmp_path, "digest.eml"), options, probe=probe)

    asyncio.run(analyzer.run())

    assert probe.calls == ["https://cdn.example.com/hero.jpg"]
    assert analyzer.report.external_assets.sizes == [512]


def test_report_properties(tmp_path):
    analyzer = EmlAnalyzer(_write(tmp_path, "digest.eml"))
    asyncio.run(analyzer.run())

    assert analyzer.mime.html is True
    assert analyzer.mime.text is False
    assert analyzer.subject.words == 2
    assert analyzer.sender.tld == "co.uk"
    assert analyzer.sender.subdomain == "letters"
    assert analyzer.has_attachments is False
    report = analyzer.report
    assert report.html.tags == {"table": 1, "tr": 1, "td": 1, "img": 1}
    assert report.html.attributes == ["src"]
    assert report.html.url_protocols == ["https:"]


MIXED_HOSTS = textwrap.dedent(
    """
    From: News <news@letters.example.co.uk>
    Subject: Mixed hosts
    MIME-Version: 1.0
    Content-Type: text/html; charset="utf-8"

    <link rel="stylesheet" href="http://a..b/theme.css">
    <img src="http://a..b/x.gif">
    <img src="http://exa mple.com/a.png">
    <img src="{hero}">
    <img src="{logo}">
    """
).lstrip()


async def _logo(request: web.Request) -> web.Response:
    return web.Response(body=b"x" * 1234, content_type="image/png")


def test_size_lookup_error_does_not_abort_the_run(tmp_path):
    hero = "https://cdn.example.com/hero.jpg"
    logo = "https://cdn.example.com/logo.png"
    probe = FakeProbe(512, errors={hero: UnicodeError("label empty or too long")})
    path = _write(tmp_path, "mixed.eml", MIXED_HOSTS.format(hero=hero, logo=logo))
    options = AnalyzerOptions(fetch_external_assets_size=True)
    analyzer = EmlAnalyzer(path, options, probe=probe)

    asyncio.run(analyzer.run())

    assert probe.calls == [hero, logo]
    assets = analyzer.report.external_assets
    assert assets.formats == [".jpg", ".png"]
    assert assets.sizes == [512]


def test_malformed_hosts_are_skipped_with_real_size_lookup(tmp_path):
    async def scenario() -> EmlAnalyzer:
        app = web.Application()
        app.router.add_get("/logo.png", _logo)
        server = TestServer(app)
        await server.start_server()
        try:
            source = MIXED_HOSTS.format(
                hero=server.make_url("/missing.jpg"),
                logo=server.make_url("/logo.png"),
            )
            options = AnalyzerOptions(fetch_external_assets_size=True, probe_timeout=5)
            analyzer = EmlAnalyzer(_write(tmp_path, "mixed.eml", source), options)
            await analyzer.run()
            return analyzer
        finally:
            await server.close()

    analyzer = asyncio.run(scenario())

    assets = analyzer.report.external_assets
    assert assets.image_count == 4
    assert assets.formats == [".jpg", ".png"]
    assert assets.sizes == [1234]
    assert analyzer.report.html.url_protocols == ["http:"]
