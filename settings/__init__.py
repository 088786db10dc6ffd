"""Application settings."""

import os
from datetime import timedelta
from pathlib import Path

# Database
DB_PATH = os.getenv("CITY_EXPLORER_DB_PATH", "city_explorer.duckdb")

# Logging
LOG_DIR = Path(os.getenv("CITY_EXPLORER_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Server
APP_NAME = "City Explorer API"
PORT = int(os.getenv("PORT", "3000"))

# Providers
API_TIMEOUT = 30
MAX_CONCURRENT = 20

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
DARKSKY_URL = "https://api.darksky.net/forecast"
YELP_URL = "https://api.yelp.com/v3/businesses/search"
MOVIE_URL = "https://api.themoviedb.org/3/search/movie"
MOVIE_IMAGE_URL = "https://image.tmdb.org/t/p/w200_and_h300_bestv2"
MEETUP_URL = "https://api.meetup.com/find/groups"
TRAILS_URL = "https://www.hikingproject.com/data/get-trails"

GEOCODE_API_KEY = os.getenv("GEOCODE_API_KEY", "")
DARKSKY_API_KEY = os.getenv("DARKSKY_API_KEY", "")
YELP_API_KEY = os.getenv("YELP_API_KEY", "")
MOVIE_API_KEY = os.getenv("MOVIE_API_KEY", "")
MEETUP_API_KEY = os.getenv("MEETUP_API_KEY", "")
TRAIL_API_KEY = os.getenv("TRAIL_API_KEY", "")

# Freshness (max age of a cached batch)
WEATHER_TTL = timedelta(seconds=15)
BUSINESS_TTL = timedelta(days=7)
MOVIE_TTL = timedelta(hours=24)
MEETUP_TTL = timedelta(hours=24)
TRAIL_TTL = timedelta(hours=1)
