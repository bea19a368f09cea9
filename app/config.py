import os

DATABASE_URL = os.environ.get("DATABASE_URL", "sqlite:///./sudharnayak.db")
FRONTEND_URL = os.environ.get("FRONTEND_URL", "http://localhost:5173")
IS_PRODUCTION = os.environ.get("PRODUCTION", "").lower() in ("1", "true", "yes")
RUN_MIGRATIONS = os.environ.get("RUN_MIGRATIONS", "").lower() in ("1", "true", "yes")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

API_PREFIX = os.environ.get("API_PREFIX", "/api")

CORS_ORIGINS = [
    origin.strip() for origin in os.environ.get("CORS_ORIGINS", FRONTEND_URL).split(",") if origin.strip()
]

ACCESS_TOKEN_EXPIRE_TIME = int(os.environ.get("ACCESS_TOKEN_EXPIRE_TIME", 60 * 24 * 30)) # in minutes

### Hashing
SECRET_KEY = os.environ.get("SECRET_KEY", "sudharnayak-development-secret-key-change-me") # generate one for production with `openssl rand -hex 32`
ENCRYPTION_ALGORITHM = "HS256"

### Seeded administrator
ADMIN_EMAIL = os.environ.get("ADMIN_EMAIL")
ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD")
ADMIN_NAME = os.environ.get("ADMIN_NAME", "Administrator")

### Cloudinary (unsigned uploads)
CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME")
CLOUDINARY_UPLOAD_PRESET = os.environ.get("CLOUDINARY_UPLOAD_PRESET", "ml_default")
MAX_IMAGE_SIZE = 10 * 1024 * 1024 # in bytes

### Reverse geocoding
GEOCODER_URL = os.environ.get("GEOCODER_URL", "https://nominatim.openstreetmap.org/reverse")
GEOCODER_USER_AGENT = os.environ.get("GEOCODER_USER_AGENT", "SudharNayak/1.0")

EXTERNAL_TIMEOUT = float(os.environ.get("EXTERNAL_TIMEOUT", 15)) # in seconds

### Client data layer
API_URL = os.environ.get("API_URL", "http://127.0.0.1:8000/api")
CLIENT_TIMEOUT = float(os.environ.get("CLIENT_TIMEOUT", 60)) # slow server wake-up
