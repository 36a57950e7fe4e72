"""Per-message analysis pipeline."""

from __future__ import annotations

import logging
from contextlib import AsyncExitStack
from pathlib import Path

from .accumulator import FeatureAccumulator
from .config import AnalyzerOptions, ConfigError
from .extractor.assets import AssetResolver
from .extractor.css import CssCollector
from .extractor.document import Document
from .extractor.domain import classify_sender
from .extractor.html import HtmlCollector
from .extractor.language import detect_language, language_name
from .extractor.text import subject_metrics
from .message import Message, read_message
from .probe import Probe, SizeProbe
from .report import build_report, mime_types
from .types import LanguageInfo, MimeTypes, Report, SenderInfo, SubjectMetrics

LOGGER = logging.getLogger(__name__)
SUPPORTED_SUFFIX = ".eml"


class EmlAnalyzer:
    """Extracts a feature report from one ``.eml`` file.

    The message is parsed eagerly on construction. :meth:`run` collects the
    HTML, CSS and asset facts and may only be awaited once per instance;
    report properties are recomputed on every access.
    """

    def __init__(
        self,
        path: Path | str,
        options: AnalyzerOptions | None = None,
        *,
        probe: Probe | None = None,
    ) -> None:
        self.path = Path(path).expanduser()
        if self.path.suffix.lower() != SUPPORTED_SUFFIX:
            raise ConfigError(
                f"Only {SUPPORTED_SUFFIX} files are supported. {self.path.suffix or 'no extension'} given"
            )
        self.options = options or AnalyzerOptions()
        self._probe = probe
        self.message: Message = read_message(self.path)
        self.features = FeatureAccumulator()
        self._started = False

    async def run(self) -> None:
        """Collect every feature of the message."""

        if self._started:
            raise RuntimeError("EmlAnalyzer.run() may only be called once per instance.")
        self._started = True

        async with AsyncExitStack() as stack:
            probe: Probe | None = None
            if self.options.fetch_external_assets_size:
                probe = self._probe or await stack.enter_async_context(
                    SizeProbe(self.options.probe_timeout)
                )

            assets = AssetResolver(self.features, self.message.attachments, probe)
            css = CssCollector(self.features, assets)
            html = HtmlCollector(self.features, css, assets)

            html.collect(Document.parse(self.message.html))
            await assets.resolve()

        self.features.close()
        LOGGER.info(
            "Analyzed %s: %d element(s), %d distinct asset reference(s), invalid CSS=%s",
            self.path.name,
            len(self.features.tag_names),
            len(self.features.distinct_references()),
            self.features.has_invalid_css,
        )

    @property
    def mime(self) -> MimeTypes:
        return mime_types(self.message)

    @property
    def subject(self) -> SubjectMetrics:
        return subject_metrics(self.message.subject)

    @property
    def sender(self) -> SenderInfo:
        return classify_sender(self.message.from_address)

    @property
    def has_attachments(self) -> bool:
        return bool(self.message.attachments)

    @property
    def language(self) -> str:
        """ISO 639-3 code of the body text (or subject when the body is empty)."""

        return detect_language(self.message.text, self.message.subject)

    @property
    def language_name(self) -> str:
        return language_name(self.language)

    @property
    def report(self) -> Report:
        code = self.language
        return build_report(
            self.message,
            self.features,
            LanguageInfo(code=code, name=language_name(code)),
        )


__all__ = ["EmlAnalyzer", "SUPPORTED_SUFFIX"]
