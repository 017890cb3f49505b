import json

SEARCH_PAYLOAD = {
    "results": [
        {
            "id": 1735,
            "name": "Naruto",
            "name_english": "Naruto",
            "description": "Genç bir ninja",
            "poster": "https://animecix.tv/storage/naruto-poster.jpg",
            "backdrop": None,
            "year": 2002,
            "episode_count": 220,
            "season_count": 5,
            "genres": [{"display_name": "Aksiyon"}, {"display_name": "Macera"}],
            "tmdb_vote_average": 8.4,
        },
        {"id": 2, "name": "Boruto"},
    ]
}

EPISODES_PAYLOAD = {
    "videos": [
        {
            "id": 11,
            "name": "Sibnet",
            "url": "https://video.sibnet.ru/shell.php?videoid=1",
            "quality": "1080p",
            "extra": "",
            "language": None,
            "positive_votes": 5,
            "negative_votes": 1,
        },
        {"id": 12, "name": "Sibnet", "url": "https://video.sibnet.ru/shell.php?videoid=2"},
        {"id": 13, "name": "Tau", "url": "https://tau-video.xyz/embed/3", "language": "en"},
    ],
    "episodeList": [
        {"episode_number": "2", "season_number": "1", "name": "İkinci"},
        {
            "episode_number": "1",
            "season_number": "1",
            "name": "Başlangıç",
            "description": "Naruto akademide",
            "poster": "https://animecix.tv/storage/ep1.jpg",
            "release_date": "2002-10-03",
            "sub_name": "Enter: Naruto Uzumaki!",
        },
    ],
    "translatorPoints": [{"name": "AnimeciX Fansub", "points": 10}],
}


class FakeUpstream:
    """Stands in for AnimeScraper._make_request and remembers every call."""

    def __init__(self, body=""):
        self.body = body
        self.calls = []

    async def __call__(self, url, client_ip=None):
        self.calls.append((url, client_ip))
        if isinstance(self.body, Exception):
            raise self.body
        if isinstance(self.body, (dict, list)):
            return json.dumps(self.body)
        return self.body


