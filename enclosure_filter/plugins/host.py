"""Plugin host: hook registry and API render dispatch."""

from typing import Dict, Iterable, List, Optional

import structlog

from .interfaces import Hook, Plugin, PluginError
from ..config.settings import Settings, settings as default_settings

logger = structlog.get_logger()

RENDER_KINDS = ("article", "headline")


def available_plugins() -> Dict[str, type]:
    """Map of plugin names to plugin classes that load_all() can instantiate."""
    from ..filtering.enclosures import FilterEnclosures
    return {
        FilterEnclosures.NAME: FilterEnclosures,
    }


class PluginHost:
    """Loads plugins and dispatches hooks to them in registration order."""

    API_VERSION = Plugin.API_VERSION

    def __init__(self, storage=None, settings: Settings = None):
        self._storage = storage
        self.settings = settings or default_settings
        self.plugins: Dict[str, Plugin] = {}
        self._hooks: Dict[Hook, List[Plugin]] = {hook: [] for hook in Hook}

    @property
    def storage(self):
        """Database handle shared with plugins, created on first use."""
        if self._storage is None:
            from ..storage.factory import get_feed_storage
            self._storage = get_feed_storage()
        return self._storage

    def add_hook(self, hook: Hook, plugin: Plugin) -> None:
        """Register a plugin for a hook; repeated registrations are ignored."""
        registered = self._hooks[hook]
        if plugin not in registered:
            registered.append(plugin)

    def del_hook(self, hook: Hook, plugin: Plugin) -> None:
        registered = self._hooks[hook]
        if plugin in registered:
            registered.remove(plugin)

    def get_hooks(self, hook: Hook) -> List[Plugin]:
        return list(self._hooks[hook])

    def load(self, plugin: Plugin) -> None:
        """Check the plugin's API version and let it register its hooks."""
        version = plugin.api_version()
        if version != self.API_VERSION:
            logger.warning(
                "plugin_rejected",
                plugin=plugin.name,
                api_version=version,
                host_api_version=self.API_VERSION
            )
            raise PluginError(
                f"Plugin {plugin.name} requires API version {version}, "
                f"host provides {self.API_VERSION}"
            )

        plugin.init(self)
        self.plugins[plugin.name] = plugin

        info = plugin.about()
        logger.info("plugin_loaded", plugin=plugin.name, version=info.version, author=info.author)

    def load_all(self, names: Iterable[str]) -> None:
        """Instantiate and load plugins by name."""
        registry = available_plugins()
        for name in names:
            plugin_cls = registry.get(name)
            if plugin_cls is None:
                raise PluginError(f"Unknown plugin: {name}")
            self.load(plugin_cls())

    def get_plugin(self, name: str) -> Optional[Plugin]:
        return self.plugins.get(name)

    def render_article_api(self, article: dict, kind: str = "article") -> dict:
        """Run an API article or headline through every RENDER_ARTICLE_API hook.

        Each plugin receives the current record wrapped under ``kind`` and
        returns the unwrapped record that the next plugin will see.
        """
        if kind not in RENDER_KINDS:
            raise ValueError(f"Unknown render kind: {kind}")

        method_name = Hook.RENDER_ARTICLE_API.method_name
        for plugin in self.get_hooks(Hook.RENDER_ARTICLE_API):
            article = getattr(plugin, method_name)({kind: article})
        return article

    def render_headlines(self, headlines: List[dict]) -> List[dict]:
        """Render a getHeadlines result list."""
        return [self.render_article_api(h, kind="headline") for h in headlines]
