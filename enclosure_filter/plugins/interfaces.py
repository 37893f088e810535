"""Interface definitions for host-loaded plugins."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Hook(Enum):
    """Extension points the host dispatches to plugins."""
    RENDER_ARTICLE_API = "render_article_api"  # getHeadlines / getArticle output

    @property
    def method_name(self) -> str:
        return f"hook_{self.value}"


@dataclass
class PluginInfo:
    """Metadata a plugin reports about itself."""
    version: float
    description: str
    author: str


class PluginError(Exception):
    """Raised when a plugin cannot be loaded by the host."""


class Plugin:
    """Base class for plugins loaded by a PluginHost."""

    API_VERSION = 2
    NAME: Optional[str] = None

    @property
    def name(self) -> str:
        return self.NAME or type(self).__name__.lower()

    def about(self) -> PluginInfo:
        """Return version, description and author."""
        raise NotImplementedError

    def init(self, host) -> None:
        """Register hooks with the host."""
        raise NotImplementedError

    def api_version(self) -> int:
        return self.API_VERSION
