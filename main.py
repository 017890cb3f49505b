import logging
from typing import List, Optional

import uvicorn
from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from models import (
    AnimeInfoQuery,
    AnimeInfoResponse,
    ApiResponse,
    EpisodeQuery,
    EpisodeVideoResponse,
    SearchQuery,
    SearchResult,
)
from scraper import AnimeScraper
from services import error_response, get_client_ip, parse_query

logger = logging.getLogger(__name__)


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


app = FastAPI(
    title="Animecix API",
    description="Read-only proxy for animecix.tv search, episode videos and title info",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

scraper = AnimeScraper(settings)


@app.get(
    "/api/search",
    response_model=ApiResponse[List[SearchResult]],
    response_model_exclude_unset=True,
)
async def search(request: Request, q: Optional[str] = Query(None, description="Anime name")):
    """
    Search for an anime by name.
    """
    try:
        params = parse_query(SearchQuery, q=q)
        results = await scraper.search_anime(params.q, get_client_ip(request))
        return ApiResponse[List[SearchResult]](success=True, data=results)
    except Exception as e:
        return error_response(e)


@app.get(
    "/api/episodes",
    response_model=ApiResponse[EpisodeVideoResponse],
    response_model_exclude_unset=True,
)
async def episodes(
    request: Request,
    titleId: Optional[str] = Query(None, description="Anime title id"),
    season: Optional[str] = Query(None, description="Season number"),
    episode: Optional[str] = Query(None, description="Episode number"),
):
    """
    Get the video sources of an episode, grouped by provider.
    """
    try:
        params = parse_query(EpisodeQuery, titleId=titleId, season=season, episode=episode)
        result = await scraper.get_episode_videos(
            params.titleId, params.season, params.episode, get_client_ip(request)
        )
        return ApiResponse[EpisodeVideoResponse](success=True, data=result)
    except Exception as e:
        return error_response(e)


@app.get(
    "/api/anime-info",
    response_model=ApiResponse[AnimeInfoResponse],
    response_model_exclude_unset=True,
)
async def anime_info(request: Request, titleId: Optional[str] = Query(None, description="Anime title id")):
    """
    Check that a title page exists on animecix.
    """
    try:
        params = parse_query(AnimeInfoQuery, titleId=titleId)
        result = await scraper.get_anime_info(params.titleId, get_client_ip(request))
        return ApiResponse[AnimeInfoResponse](success=True, data=result)
    except Exception as e:
        return error_response(e)


if __name__ == "__main__":
    configure_logging()
    uvicorn.run("main:app", host=settings.host, port=settings.port)
