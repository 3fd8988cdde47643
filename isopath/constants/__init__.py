from .movement_constants import *  # noqa: F401,F403
