from flask_babel import Babel
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

babel = Babel()
limiter = Limiter(key_func=get_remote_address)
