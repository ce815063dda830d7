import os
from dotenv import load_dotenv

load_dotenv()

# PostgreSQL connection string (Supabase/Neon/Render in production)
DATABASE_URL = os.getenv("DATABASE_URL") or os.getenv("POSTGRES_URL")

# Where the vocabulary list comes from: static, remote or database
VOCABULARY_SOURCE = os.getenv("VOCABULARY_SOURCE", "static")

# Read endpoint used by the remote source
VOCABULARY_API_URL = os.getenv("VOCABULARY_API_URL", "http://localhost:5000/api/vocabulary")

# Seconds
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
STATIC_LOAD_DELAY = float(os.getenv("STATIC_LOAD_DELAY", "0"))

AUDIO_CACHE_DIR = os.getenv("AUDIO_CACHE_DIR", "data/audio_cache")

PORT = int(os.getenv("PORT", 5000))
