from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from pix_brcode.config import RATE_LIMIT


limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[RATE_LIMIT]
)
