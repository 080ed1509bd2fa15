import os

from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Global Limiter instance imported by controllers; create_app() disables it
# when RATE_LIMIT_ENABLED=0.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[],
    storage_uri=os.getenv("LIMITER_STORAGE_URI", "memory://"),
)
