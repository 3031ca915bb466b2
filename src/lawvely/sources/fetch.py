"""Fetch legislation text from its source URL."""

from __future__ import annotations

import logging
import re
from html.parser import HTMLParser

import httpx

from lawvely.core.config import SourceConfig
from lawvely.core.errors import FetchError

logger = logging.getLogger(__name__)

_MARKUP_TYPES = ("html", "xml", "xhtml")
_SKIP_TAGS = ("script", "style", "noscript")
_BLOCK_TAGS = (
    "p", "div", "br", "li", "tr", "table", "section", "title",
    "h1", "h2", "h3", "h4", "h5", "h6",
)


class HTMLToText(HTMLParser):
    """Minimal HTML/XHTML to text converter that keeps block boundaries."""

    def __init__(self) -> None:
        super().__init__()
        self._parts: list[str] = []
        self._skip = False

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _SKIP_TAGS:
            self._skip = True
        elif tag in _BLOCK_TAGS:
            self._parts.append("\n")
        elif tag == "td":
            self._parts.append(" | ")

    def handle_endtag(self, tag: str) -> None:
        if tag in _SKIP_TAGS:
            self._skip = False
        elif tag in _BLOCK_TAGS:
            self._parts.append("\n")

    def handle_data(self, data: str) -> None:
        if not self._skip:
            self._parts.append(data)

    def get_text(self) -> str:
        raw = "".join(self._parts)
        # Collapse spaces, then blank lines
        raw = re.sub(r"[ \t\r\f\v]+", " ", raw)
        raw = "\n".join(line.strip() for line in raw.split("\n"))
        raw = re.sub(r"\n{3,}", "\n\n", raw)
        return raw.strip()


def html_to_text(markup: str) -> str:
    """Convert HTML or XHTML to plain text, dropping scripts and styles."""
    parser = HTMLToText()
    parser.feed(markup)
    parser.close()
    return parser.get_text()


class LegislationFetcher:
    """Downloads legislation pages and returns their readable text."""

    def __init__(
        self,
        config: SourceConfig | None = None,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or SourceConfig()
        self._http = http or httpx.AsyncClient(
            timeout=httpx.Timeout(self._config.timeout_seconds),
            follow_redirects=True,
            headers={"User-Agent": self._config.user_agent},
        )

    async def fetch(self, url: str) -> str:
        """Return the plain text at ``url``.

        Raises:
            FetchError: On transport failure, non-2xx status or empty body.
        """
        try:
            resp = await self._http.get(url)
        except httpx.HTTPError as exc:
            raise FetchError(url, str(exc)) from exc

        if not resp.is_success:
            raise FetchError(url, f"HTTP {resp.status_code}")

        content_type = resp.headers.get("content-type", "").lower()
        if any(kind in content_type for kind in _MARKUP_TYPES):
            text = html_to_text(resp.text)
        else:
            text = resp.text.strip()

        if not text:
            raise FetchError(url, "empty document")
        logger.debug("Fetched %d characters from %s", len(text), url)
        return text

    async def close(self) -> None:
        await self._http.aclose()
