from .cors import CORSGateMiddleware
from .errors.catchall import CatchAllExceptionMiddleware
from .errors.handlers import register_error_handlers

__all__ = ["CORSGateMiddleware", "CatchAllExceptionMiddleware", "register_error_handlers"]
