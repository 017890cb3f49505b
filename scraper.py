import asyncio
import json
import logging
import math
import re
import urllib.parse
from typing import Any, Dict, List, Optional

import aiohttp

from config import Settings, settings as default_settings
from errors import NotFoundError, ParseError, UpstreamError, ValidationError
from models import (
    AnimeInfoResponse,
    EpisodeInfo,
    EpisodeVideo,
    EpisodeVideoResponse,
    SearchResult,
    Votes,
)

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone on top of the RFC 3986 unreserved set.
URI_COMPONENT_SAFE = "!~*'()"

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_PREFIXED_INT_RE = re.compile(r"0[xX][0-9a-fA-F]+|0[bB][01]+|0[oO][0-7]+")


def _to_number(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    if _PREFIXED_INT_RE.fullmatch(text):
        return float(int(text, 0))
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf
    return math.nan


def _js_string(value: Any) -> str:
    """String form of a JSON value as a browser script would print it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, list):
        return ",".join(_js_string(item) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def loose_equals(value: Any, text: str) -> bool:
    """
    Compare an upstream value with a query string the way a browser script
    would with ``==``: numbers are compared against the string's numeric
    value, strings are compared as-is, arrays and objects by their string
    form, and null matches nothing.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return value == text
    # bool is an int, so True/False compare as 1/0
    if isinstance(value, (int, float)):
        return value == _to_number(text)
    return _js_string(value) == text


def _require(value: Optional[str], message: str) -> str:
    if not value:
        raise ValidationError(message)
    return value


def _parse_json(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError as e:
        raise ParseError(f"Invalid JSON from upstream: {e}") from e


def _map_search_result(anime: Dict) -> SearchResult:
    genres = anime.get("genres")
    if not isinstance(genres, list):
        genres = []
    return SearchResult(
        id=anime.get("id"),
        name=anime.get("name"),
        name_english=anime.get("name_english") or "",
        description=anime.get("description") or "",
        poster=anime.get("poster") or "",
        backdrop=anime.get("backdrop") or "",
        year=anime.get("year") or 0,
        episode_count=anime.get("episode_count") or 0,
        season_count=anime.get("season_count") or 1,
        genres=[
            genre.get("display_name") if isinstance(genre, dict) else None for genre in genres
        ],
        rating=anime.get("tmdb_vote_average") or 0,
    )


def _map_video(video: Dict) -> EpisodeVideo:
    return EpisodeVideo(
        id=video.get("id"),
        url=video.get("url"),
        quality=video.get("quality") or "regular",
        extra=video.get("extra") or "",
        language=video.get("language") or "tr",
        votes=Votes(
            positive=video.get("positive_votes") or 0,
            negative=video.get("negative_votes") or 0,
        ),
    )


def _map_episode_info(episode: Dict) -> EpisodeInfo:
    return EpisodeInfo(
        name=episode.get("name") or "",
        description=episode.get("description") or "",
        poster=episode.get("poster") or "",
        release_date=episode.get("release_date") or "",
        sub_name=episode.get("sub_name") or "",
    )


class AnimeScraper:
    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or default_settings

    def build_headers(self, client_ip: Optional[str] = None) -> Dict[str, str]:
        forwarded_ip = client_ip or self.settings.fallback_ip
        return {
            "Accept": self.settings.accept,
            "Accept-Language": self.settings.accept_language,
            "Referer": self.settings.referer,
            "User-Agent": self.settings.user_agent,
            "X-Forwarded-For": forwarded_ip,
            "X-Real-IP": forwarded_ip,
            "CF-IPCountry": self.settings.country,
            "Origin": self.settings.origin,
        }

    def search_url(self, query: str) -> str:
        encoded_query = urllib.parse.quote(query, safe=URI_COMPONENT_SAFE)
        return (
            f"{self.settings.api_base_url}/search/{encoded_query}"
            f"?type=&limit={self.settings.search_limit}&provider="
        )

    def episode_videos_url(self, title_id: str, season: str, episode: str) -> str:
        params = urllib.parse.urlencode(
            {"titleId": title_id, "episode": episode, "season": season}
        )
        return f"{self.settings.api_base_url}/episode-videos-points?{params}"

    def title_url(self, title_id: str) -> str:
        return f"{self.settings.base_url}/titles/{urllib.parse.quote(title_id, safe='')}"

    async def _make_request(self, url: str, client_ip: Optional[str] = None) -> str:
        headers = self.build_headers(client_ip)
        timeout = aiohttp.ClientTimeout(total=self.settings.request_timeout)
        logger.debug("GET %s (forwarded for %s)", url, headers["X-Forwarded-For"])
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, headers=headers) as response:
                    if not 200 <= response.status < 300:
                        logger.warning("Upstream returned %s for %s", response.status, url)
                        raise UpstreamError(
                            f"HTTP Hatası: {response.status}", status=response.status
                        )
                    return await response.text(errors="replace")
        except asyncio.TimeoutError:
            logger.warning("Upstream request timed out: %s", url)
            raise UpstreamError("Upstream request timed out") from None
        except aiohttp.ClientError as e:
            logger.warning("Upstream request failed for %s: %s", url, e)
            raise UpstreamError(str(e) or e.__class__.__name__) from e

    async def search_anime(self, query: str, client_ip: Optional[str] = None) -> List[SearchResult]:
        """
        Search animecix for titles matching the query (at most ``search_limit``).
        """
        _require(query, "Query parameter is required")
        data = _parse_json(await self._make_request(self.search_url(query), client_ip))

        if not isinstance(data, dict) or not isinstance(data.get("results"), list):
            raise NotFoundError("Anime bulunamadı")

        return [_map_search_result(anime) for anime in data["results"]]

    async def get_episode_videos(
        self,
        title_id: str,
        season: str,
        episode: str,
        client_ip: Optional[str] = None,
    ) -> EpisodeVideoResponse:
        """
        Get the video sources of one episode, grouped by provider name.
        """
        _require(title_id, "titleId parameter is required")
        _require(season, "season parameter is required")
        _require(episode, "episode parameter is required")

        url = self.episode_videos_url(title_id, season, episode)
        data = _parse_json(await self._make_request(url, client_ip))

        if not isinstance(data, dict) or not isinstance(data.get("videos"), list):
            raise NotFoundError("Video bulunamadı")

        sources: Dict[str, List[EpisodeVideo]] = {}
        for video in data["videos"]:
            source_name = video.get("name")
            key = "unknown" if source_name is None else _js_string(source_name)
            sources.setdefault(key, []).append(_map_video(video))

        episode_info = None
        episode_list = data.get("episodeList")
        for ep in episode_list if isinstance(episode_list, list) else []:
            if not isinstance(ep, dict):
                continue
            if loose_equals(ep.get("episode_number"), episode) and loose_equals(
                ep.get("season_number"), season
            ):
                episode_info = _map_episode_info(ep)
                break

        return EpisodeVideoResponse(
            episode_info=episode_info,
            sources=sources,
            translator_points=data.get("translatorPoints") or [],
            total_videos=len(data["videos"]),
        )

    async def get_anime_info(self, title_id: str, client_ip: Optional[str] = None) -> AnimeInfoResponse:
        """
        Check that the title page exists.

        This only looks for the word "title" in the raw page and returns a
        fixed message pointing at the page; it does not parse anything.
        """
        _require(title_id, "titleId parameter is required")
        url = self.title_url(title_id)
        text = await self._make_request(url, client_ip)

        if "title" not in text:
            raise NotFoundError("Anime bilgisi bulunamadı")

        return AnimeInfoResponse(
            message="Anime bilgileri mevcut",
            url=url,
            note="Detaylı bilgi için web sayfasını ziyaret edin",
        )
