"""HTTP client for the ESPN public scoreboard API."""

import http.client
import json
import socket
import time
from datetime import date
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from ..config.defaults import ApiParams
from ..errors import ApiParseError, ApiRequestError, ApiResponseError
from ..logging.config import get_api_logger, log_api_request
from ..utils.time import scoreboard_date_range
from .models import Game, GameDetail
from .parsers import parse_scoreboard_payload, parse_summary_payload

logger = get_api_logger(__name__)


class ESPNClient:
    """Fetches scoreboards and game summaries, retrying transient failures."""

    def __init__(self, config: Optional[ApiParams] = None):
        self.config = config or ApiParams()
        self.logger = logger
        self._request_count = 0
        self._error_count = 0

    def scoreboard_url(self, sport: str, league: str, dates: Optional[str] = None) -> str:
        """URL of a league scoreboard, optionally for a ``YYYYMMDD-YYYYMMDD`` range."""
        url = f"{self.config.base_url.rstrip('/')}/{sport}/{league}/scoreboard"
        if dates:
            url += "?" + urlencode({"dates": dates})
        return url

    def summary_url(self, sport: str, league: str, event_id: str) -> str:
        """URL of a single event summary."""
        return (
            f"{self.config.base_url.rstrip('/')}/{sport}/{league}/summary?"
            + urlencode({"event": event_id})
        )

    def get_games(self, sport: str, league: str, show_upcoming: bool = False,
                  today: Optional[date] = None) -> list[Game]:
        """
        Fetch games for a league.

        Args:
            sport: ESPN sport id (``basketball``)
            league: ESPN league id (``nba``)
            show_upcoming: If True, return scheduled games over the upcoming
                window instead of the current scoreboard
            today: First day of the upcoming window (default: local today)

        Returns:
            Current scoreboard games, or upcoming games sorted by start time

        Raises:
            ApiRequestError: Network failure after all retries
            ApiResponseError: Permanent HTTP error
            ApiParseError: Malformed response
        """
        if not show_upcoming:
            return parse_scoreboard_payload(self._get_json(self.scoreboard_url(sport, league)))

        start = today or date.today()
        dates = scoreboard_date_range(start, self.config.upcoming_days)
        games = parse_scoreboard_payload(self._get_json(self.scoreboard_url(sport, league, dates)))

        upcoming = [g for g in games if g.state == "pre"]
        # Unknown start times sort last
        upcoming.sort(key=lambda g: (g.date is None, g.date or start))
        return upcoming

    def get_game_detail(self, sport: str, league: str, event_id: str) -> GameDetail:
        """Fetch and parse the summary for one event."""
        payload = self._get_json(self.summary_url(sport, league, event_id))
        return parse_summary_payload(payload, event_id)

    def _get_json(self, url: str) -> Any:
        """GET a URL and decode JSON, retrying transient failures."""
        attempt = 0
        last_error: Optional[ApiRequestError] = None

        while attempt <= self.config.max_retries:
            attempt += 1
            try:
                body = self._fetch(url, attempt)
                break
            except ApiRequestError as e:
                last_error = e
                if attempt <= self.config.max_retries:
                    self.logger.warning(
                        f"Request attempt {attempt} failed, retrying in {self.config.retry_delay_seconds}s",
                        url=url,
                        error=str(e)
                    )
                    time.sleep(self.config.retry_delay_seconds)
        else:
            self._error_count += 1
            assert last_error is not None
            raise ApiRequestError(
                f"{last_error} (after {attempt} attempts)",
                url=url,
                status_code=last_error.status_code,
                attempts=attempt
            ) from last_error

        try:
            return json.loads(body)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            self._error_count += 1
            raise ApiParseError(
                f"failed to parse response: {e}",
                url=url,
                raw_data=body[:200].decode("utf-8", errors="replace"),
                expected_format="json"
            ) from e

    def _fetch(self, url: str, attempt: int) -> bytes:
        """Perform one GET; classify failures as retryable or permanent."""
        self._request_count += 1
        req = Request(
            url,
            headers={
                "Accept": "application/json",
                "User-Agent": self.config.user_agent,
            },
            method="GET"
        )

        start_time = time.time()
        try:
            with urlopen(req, timeout=self.config.timeout_seconds) as response:
                status = response.getcode()
                body = response.read()

        except HTTPError as e:
            elapsed = int((time.time() - start_time) * 1000)
            log_api_request(self.logger, url, e.code, attempt, elapsed, error=str(e.reason))

            # Server errors are retryable
            if e.code >= 500:
                raise ApiRequestError(f"API returned status code: {e.code}", url=url, status_code=e.code)
            self._error_count += 1
            raise ApiResponseError(f"API returned status code: {e.code}", url=url, status_code=e.code)

        except (OSError, URLError, socket.timeout, http.client.HTTPException) as e:
            # Network errors and truncated responses are retryable
            elapsed = int((time.time() - start_time) * 1000)
            log_api_request(self.logger, url, None, attempt, elapsed, error=str(e))
            raise ApiRequestError(f"failed to fetch: {e}", url=url)

        elapsed = int((time.time() - start_time) * 1000)
        if status != 200:
            log_api_request(self.logger, url, status, attempt, elapsed, error="unexpected status")
            if status >= 500:
                raise ApiRequestError(f"API returned status code: {status}", url=url, status_code=status)
            self._error_count += 1
            raise ApiResponseError(f"API returned status code: {status}", url=url, status_code=status)

        log_api_request(self.logger, url, status, attempt, elapsed)
        return body

    def get_stats(self) -> dict[str, Any]:
        """Get request statistics."""
        return {
            "request_count": self._request_count,
            "error_count": self._error_count,
        }
