from .__version__ import __version__
from .config import ServerConfig
from .server.app import create_app

__all__ = ["ServerConfig", "create_app", "__version__"]
