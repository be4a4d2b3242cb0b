import os

from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Load the demo client list into an empty client store at start-up
SEED_CLIENTS = os.getenv("SEED_CLIENTS", "true").lower() in ("1", "true", "yes")

# Comma separated list of origins allowed to call the API from a browser
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

API_PREFIX = os.getenv("API_PREFIX", "/api")
