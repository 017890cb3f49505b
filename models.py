from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SearchResult(BaseModel):
    # Values are copied from upstream as they are; only the defaults are ours.
    id: Any = None
    name: Any = None
    name_english: Any = ""
    description: Any = ""
    poster: Any = ""
    backdrop: Any = ""
    year: Any = 0
    episode_count: Any = 0
    season_count: Any = 1
    genres: List[Any] = []
    rating: Any = 0


class Votes(BaseModel):
    positive: Any = 0
    negative: Any = 0


class EpisodeVideo(BaseModel):
    id: Any = None
    url: Any = None
    quality: Any = "regular"
    extra: Any = ""
    language: Any = "tr"
    votes: Votes


class EpisodeInfo(BaseModel):
    name: Any = ""
    description: Any = ""
    poster: Any = ""
    release_date: Any = ""
    sub_name: Any = ""


class EpisodeVideoResponse(BaseModel):
    episode_info: Optional[EpisodeInfo]
    sources: Dict[str, List[EpisodeVideo]]
    translator_points: Any
    total_videos: int


class AnimeInfoResponse(BaseModel):
    message: str
    url: str
    note: str


class ApiResponse(BaseModel, Generic[T]):
    success: bool
    data: Optional[T] = None
    error: Optional[str] = None


# Query parameters. The description of each field is also its error message.

class SearchQuery(BaseModel):
    q: str = Field(min_length=1, description="Query parameter is required")


class EpisodeQuery(BaseModel):
    titleId: str = Field(min_length=1, description="titleId parameter is required")
    season: str = Field(min_length=1, description="season parameter is required")
    episode: str = Field(min_length=1, description="episode parameter is required")


class AnimeInfoQuery(BaseModel):
    titleId: str = Field(min_length=1, description="titleId parameter is required")
