"""Lightweight HTTP client for a hosted dictionary table."""

from __future__ import annotations

import os
import random
from typing import Any, Dict, List, Optional

import requests

from ..core.exceptions import WordSourceError
from ..core.models import WordEntry
from ..data.word_source import WordRequest, select_entries
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

RANDOM_INDEX_CEILING = 900_000


class RestDictionarySource:
    """Word source backed by a PostgREST-style ``dictionary`` table.

    Rows carry ``word``, ``length`` and a precomputed ``random_index`` column;
    a random floor on ``random_index`` picks a pseudo-random window without a
    server-side shuffle.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        table: str = "dictionary",
        url_env: str = "WORDSEARCH_DICTIONARY_URL",
        api_key_env: str = "WORDSEARCH_DICTIONARY_KEY",
        timeout_seconds: float = 10.0,
        seed: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or os.environ.get(url_env) or "").rstrip("/")
        if not self.base_url:
            raise RuntimeError(f"Missing dictionary URL in environment variable {url_env}")
        self.table = table
        self.timeout_seconds = timeout_seconds
        self._api_key = os.environ.get(api_key_env)
        self.rng = random.Random(seed)
        self.http = session or requests.Session()

    def fetch(self, request: WordRequest) -> List[WordEntry]:
        rows = self._query(request, self.rng.randrange(RANDOM_INDEX_CEILING))
        words = [
            row["word"]
            for row in rows
            if isinstance(row, dict) and isinstance(row.get("word"), str)
        ]
        entries = select_entries(words, request, self.rng)
        if not entries:
            raise WordSourceError("No valid words returned by hosted dictionary")
        LOGGER.info("Hosted dictionary produced %s words", len(entries))
        return entries

    def _query(self, request: WordRequest, random_floor: int) -> List[Dict[str, Any]]:
        url = f"{self.base_url}/rest/v1/{self.table}"
        params = [
            ("select", "word,length"),
            ("length", f"gte.{request.min_length}"),
            ("length", f"lte.{request.max_length}"),
            ("random_index", f"gte.{random_floor}"),
            ("order", "random_index"),
            ("limit", str(request.limit)),
        ]
        try:
            response = self.http.get(
                url,
                params=params,
                headers=self._headers(),
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise WordSourceError(f"Dictionary request failed: {exc}") from exc
        except ValueError as exc:
            raise WordSourceError(f"Dictionary returned invalid JSON: {exc}") from exc

        if not isinstance(payload, list):
            LOGGER.warning("Unexpected dictionary payload: %s", payload)
            raise WordSourceError("Dictionary response is not a row list")
        return payload

    def _headers(self) -> Dict[str, str]:
        if not self._api_key:
            return {}
        return {"apikey": self._api_key, "Authorization": f"Bearer {self._api_key}"}
