from __future__ import annotations

import time
from dataclasses import dataclass

import requests

from whiterabbit.logging_utils import init_logger

logger = init_logger(__name__)


@dataclass
class HttpClient:
    """Downloads remote corpus files, retrying server errors and dropped connections."""

    timeout: float = 30.0
    retries: int = 3
    backoff_sec: float = 1.0

    def fetch_text(self, url: str) -> str:
        attempts = max(self.retries, 1)
        reason = ""
        for attempt in range(attempts):
            try:
                resp = requests.get(url, timeout=self.timeout)
            except requests.RequestException as exc:
                reason = str(exc)
            else:
                if resp.status_code < 500:
                    # 4xx will not improve on retry
                    resp.raise_for_status()
                    return resp.text
                reason = f"HTTP {resp.status_code}"
            if attempt + 1 < attempts:
                delay = self.backoff_sec * 2**attempt
                logger.debug("fetch %s failed (%s), retrying in %.1fs", url, reason, delay)
                time.sleep(delay)
        raise RuntimeError(f"giving up on {url} after {attempts} attempts: {reason}")
