from functools import wraps

import anyio


def blocking(f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        return anyio.run(lambda: f(*args, **kwargs))

    return wrapper
