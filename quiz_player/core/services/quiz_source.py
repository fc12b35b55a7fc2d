"""Asynchronous sources that fetch raw quiz payloads by location."""

from __future__ import annotations

from abc import ABC, abstractmethod
import asyncio
import json
import logging
from pathlib import Path
from typing import Any

import aiohttp

from quiz_player.constants.network_constants import HTTP_FETCH_TIMEOUT_SECONDS
from quiz_player.core.errors import QuizLoadError
from quiz_player.core.quiz_importer import parse_quiz_text

logger = logging.getLogger(__name__)


class QuizSource(ABC):
    """Fetches a quiz payload. The session treats the result as opaque data."""

    @abstractmethod
    async def fetch(self, location: str) -> Any:
        """
        Fetch the quiz stored at ``location``.

        :param location: File path or URL understood by the source
        :return: Quiz-shaped structured data (usually a dict)
        :raises QuizLoadError: If the payload cannot be fetched or decoded
        """


class JsonFileQuizSource(QuizSource):
    async def fetch(self, location: str) -> Any:
        text = await _read_text(Path(location))
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise QuizLoadError(f"'{location}' is not valid JSON: {exc}") from exc


class TextFileQuizSource(QuizSource):
    async def fetch(self, location: str) -> Any:
        text = await _read_text(Path(location))
        return parse_quiz_text(text)


class HttpQuizSource(QuizSource):
    """GETs a JSON quiz over HTTP, bypassing intermediate caches."""

    def __init__(self, timeout_seconds: float = HTTP_FETCH_TIMEOUT_SECONDS) -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch(self, location: str) -> Any:
        headers = {"Cache-Control": "no-cache"}
        try:
            async with aiohttp.ClientSession(timeout=self._timeout) as client:
                async with client.get(location, headers=headers) as response:
                    if response.status >= 400:
                        raise QuizLoadError(
                            f"Fetching '{location}' failed with HTTP {response.status}."
                        )
                    return await response.json(content_type=None)
        except aiohttp.ClientError as exc:
            raise QuizLoadError(f"Could not fetch '{location}': {exc}") from exc
        except asyncio.TimeoutError as exc:
            raise QuizLoadError(f"Fetching '{location}' timed out.") from exc
        except json.JSONDecodeError as exc:
            raise QuizLoadError(f"'{location}' did not return valid JSON: {exc}") from exc


def source_for_location(location: str) -> QuizSource:
    """Pick the source matching a file path or URL."""
    if location.startswith(("http://", "https://")):
        return HttpQuizSource()
    if Path(location).suffix.lower() == ".txt":
        return TextFileQuizSource()
    return JsonFileQuizSource()


async def _read_text(file_path: Path) -> str:
    logger.debug("Reading quiz file %s", file_path)
    try:
        return await asyncio.to_thread(file_path.read_text, encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise QuizLoadError(f"Could not read quiz file '{file_path}': {exc}") from exc
