"""Weather Scene client"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("weather-scene")
except PackageNotFoundError:
    __version__ = "dev"
