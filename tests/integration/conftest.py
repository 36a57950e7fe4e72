from __future__ import annotations

import asyncio
import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from emlanalyzer.analyzer import EmlAnalyzer
from emlanalyzer.config import AnalyzerOptions
from emlanalyzer.probe import Probe


@pytest.fixture
def write_eml(tmp_path: Path) -> Callable[..., Path]:
    """Write dedented message source into the test directory."""

    def _write(contents: str, name: str = "message.eml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(contents).lstrip(), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def analyze() -> Callable[..., EmlAnalyzer]:
    """Run the analyzer over a path and return it once finished."""

    def _analyze(
        path: Path,
        *,
        fetch_sizes: bool = False,
        probe: Probe | None = None,
    ) -> EmlAnalyzer:
        options = AnalyzerOptions(fetch_external_assets_size=fetch_sizes)
        analyzer = EmlAnalyzer(path, options, probe=probe)
        asyncio.run(analyzer.run())
        return analyzer

    return _analyze


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Automatically mark tests in this package as integration."""

    package_root = Path(__file__).resolve().parent
    integration_mark = pytest.mark.integration
    for item in items:
        try:
            path = Path(item.fspath).resolve()
        except OSError:
            continue
        if package_root in path.parents:
            item.add_marker(integration_mark)
