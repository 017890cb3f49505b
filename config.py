import os

from pydantic import BaseModel, ConfigDict

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseModel):
    """
    Everything the scraper needs to pass for a browser in Turkey.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = os.getenv("ANIMECIX_BASE_URL", "https://animecix.tv")
    api_base_url: str = os.getenv("ANIMECIX_API_BASE_URL", "https://animecix.tv/secure")
    user_agent: str = os.getenv("ANIMECIX_USER_AGENT", DEFAULT_USER_AGENT)
    fallback_ip: str = os.getenv("ANIMECIX_FALLBACK_IP", "88.250.140.151")
    accept: str = "application/json, text/plain, */*"
    accept_language: str = os.getenv("ANIMECIX_ACCEPT_LANGUAGE", "tr-TR,tr;q=0.9,en;q=0.8")
    country: str = os.getenv("ANIMECIX_COUNTRY", "TR")
    search_limit: int = int(os.getenv("ANIMECIX_SEARCH_LIMIT", "8"))
    request_timeout: float = float(os.getenv("ANIMECIX_REQUEST_TIMEOUT", "15"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    @property
    def referer(self) -> str:
        return f"{self.base_url}/"

    @property
    def origin(self) -> str:
        return self.base_url


settings = Settings()
