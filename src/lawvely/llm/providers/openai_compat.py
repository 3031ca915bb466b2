"""OpenAI-compatible chat completions provider (OpenAI, vLLM, llama-cpp-python)."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import httpx

from lawvely.core.config import LLMConfig
from lawvely.core.errors import LLMError, LLMTimeoutError
from lawvely.llm.client import LLMClient

logger = logging.getLogger(__name__)


class OpenAICompatClient(LLMClient):
    """Talks to any server that exposes the OpenAI /v1/chat/completions API."""

    def __init__(self, config: LLMConfig) -> None:
        super().__init__(config)
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if config.api_key:
            headers["Authorization"] = f"Bearer {config.api_key}"
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout_seconds),
            headers=headers,
        )

    # -- public API ----------------------------------------------------------

    async def chat(
        self,
        messages: list[dict],
        *,
        max_tokens: int | None = None,
        temperature: float | None = None,
    ) -> str:
        payload: dict[str, Any] = {
            "model": self.config.model,
            "messages": messages,
            "max_tokens": max_tokens if max_tokens is not None else self.config.max_tokens,
            "temperature": (
                temperature if temperature is not None else self.config.temperature
            ),
        }

        resp = await self._request_with_retry("POST", "/v1/chat/completions", json=payload)
        if resp.status_code >= 400:
            raise LLMError(
                f"Chat completion failed with HTTP {resp.status_code}",
                status_code=resp.status_code,
            )
        try:
            data = resp.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise LLMError(f"Malformed chat completion response: {exc}") from exc
        if not isinstance(content, str):
            raise LLMError("Chat completion returned no text content")
        return content

    async def is_available(self) -> bool:
        try:
            r = await self._http.get("/v1/models")
            return r.status_code == 200
        except httpx.HTTPError:
            return False

    async def close(self) -> None:
        await self._http.aclose()

    # -- internal retry logic ------------------------------------------------

    async def _request_with_retry(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Execute an HTTP request with retry on 5xx and transport errors."""
        max_attempts = max(1, self.config.max_retries + 1)
        last_resp: httpx.Response | None = None

        for attempt in range(max_attempts):
            try:
                resp = await self._http.request(method, url, **kwargs)
                # Client errors (auth, rate limit, bad request) are final
                if resp.status_code < 500:
                    return resp
                last_resp = resp
                if attempt < max_attempts - 1:
                    delay = 0.5 * (2 ** attempt)
                    logger.warning(
                        "Request to %s returned %d, retrying in %.1fs (%d/%d)",
                        url, resp.status_code, delay, attempt + 1, max_attempts,
                    )
                    await asyncio.sleep(delay)
                    continue
                return resp
            except httpx.TransportError as exc:
                if attempt < max_attempts - 1:
                    delay = 0.5 * (2 ** attempt)
                    logger.warning(
                        "Transport error on %s: %s, retrying in %.1fs (%d/%d)",
                        url, exc, delay, attempt + 1, max_attempts,
                    )
                    await asyncio.sleep(delay)
                    continue
                if isinstance(exc, httpx.TimeoutException):
                    raise LLMTimeoutError(f"Request to {url} timed out") from exc
                raise LLMError(f"Transport error on {url}: {exc}") from exc

        return last_resp  # type: ignore[return-value]
