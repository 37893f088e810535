"""Filter enclosures in API responses based on the feed's display setting.

Some feeds (Lemmy, for example) carry each image twice: inline in the
article content and again as an RSS enclosure. The feed reader's
``always_display_enclosures`` setting only hides the enclosure in the web UI,
so API clients still render both copies. This plugin hooks the API render
path and drops ``attachments`` for feeds where the setting is off.
"""

from typing import Any, Callable, Optional

import structlog

from ..plugins.interfaces import Hook, Plugin, PluginInfo

logger = structlog.get_logger()

FeedSettingLookup = Callable[[Any], Optional[bool]]


def filter_enclosures(
    row: dict,
    get_feed_setting: FeedSettingLookup = None,
    lookup_enabled: bool = True
) -> dict:
    """Return the headline/article from ``row`` with attachments removed if hidden.

    Args:
        row: ``{"headline": {...}}``, ``{"article": {...}}`` or anything else
        get_feed_setting: returns a feed's always_display_enclosures value,
            or None when the feed does not exist
        lookup_enabled: fall back to ``get_feed_setting`` when the record has
            no always_display_attachments flag

    Returns:
        The unwrapped record, or ``row`` unchanged when it wraps nothing.
    """
    article = row.get("headline")
    if article is None:
        article = row.get("article")
    if not article:
        return row

    # getHeadlines sends the flag; getArticle does not
    always_display = article.get("always_display_attachments")
    feed_id = article.get("feed_id")

    if always_display is None and feed_id is not None and lookup_enabled and get_feed_setting:
        always_display = get_feed_setting(feed_id)
        if always_display is None:
            always_display = True  # feed not found
        else:
            logger.debug("feed_setting_fetched", feed_id=feed_id, always_display_enclosures=always_display)
    elif always_display is None:
        always_display = True

    if not always_display and article.get("attachments") is not None:
        article = {k: v for k, v in article.items() if k != "attachments"}
        logger.debug(
            "attachments_removed",
            title=article.get("title") or "unknown",
            feed_id=feed_id
        )

    return article


class FilterEnclosures(Plugin):
    """Plugin wrapper that applies filter_enclosures on RENDER_ARTICLE_API."""

    NAME = "af_filter_enclosures"

    def __init__(self):
        self.host = None

    def about(self) -> PluginInfo:
        return PluginInfo(
            version=1.0,
            description="Filter enclosures in API based on feed's always_display_enclosures setting",
            author="jayemar",
        )

    def init(self, host) -> None:
        self.host = host
        host.add_hook(Hook.RENDER_ARTICLE_API, self)

    def hook_render_article_api(self, row: dict) -> dict:
        return filter_enclosures(
            row,
            get_feed_setting=self._get_feed_setting,
            lookup_enabled=self.host.settings.enable_feed_lookup,
        )

    def _get_feed_setting(self, feed_id) -> Optional[bool]:
        return self.host.storage.get_feed_setting(feed_id)

    def api_version(self) -> int:
        return 2
