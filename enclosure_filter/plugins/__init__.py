"""Plugin host and plugin interfaces."""

from .interfaces import Hook, Plugin, PluginError, PluginInfo
from .host import PluginHost, available_plugins

__all__ = ["Hook", "Plugin", "PluginError", "PluginInfo", "PluginHost", "available_plugins"]
