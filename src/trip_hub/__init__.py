"""Static site builder for AI-generated trip itineraries."""

from trip_hub.config import BuildConfig
from trip_hub.errors import BuildError
from trip_hub.site import BuildResult, build_site

__all__ = ["BuildConfig", "BuildError", "BuildResult", "build_site"]
