from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Initialize Limiter (Configured in app.py via init_app)
# Defaults and storage come from app.config (RATELIMIT_DEFAULT, RATELIMIT_STORAGE_URI)
limiter = Limiter(key_func=get_remote_address)
