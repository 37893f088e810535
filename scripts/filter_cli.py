#!/usr/bin/env python3
"""CLI tool to render API records through plugins and manage feed settings."""

import sys
import json
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from enclosure_filter.config.settings import settings
from enclosure_filter.plugins.host import PluginHost
from enclosure_filter.storage.factory import get_feed_storage


def print_header(title):
    print(f"\n{'='*60}")
    print(f" {title}")
    print('='*60)


def cmd_render(args):
    """Render an article, or a list of headlines, through the hook chain."""
    if args.file:
        with open(args.file) as f:
            data = json.load(f)
    else:
        data = json.load(sys.stdin)

    host = PluginHost()
    host.load_all(settings.plugins)

    if isinstance(data, list):
        result = host.render_headlines(data)
    else:
        result = host.render_article_api(data, kind=args.kind)

    json.dump(result, sys.stdout, indent=2, default=str)
    print()


def cmd_feeds(args):
    """List feeds and their enclosure setting."""
    feeds = get_feed_storage().list_feeds()

    print_header(f"FEEDS ({len(feeds)} found)")

    for feed in feeds:
        flag = "on " if feed["always_display_enclosures"] else "off"
        print(f"\n  [{feed['id']:4}] {feed['title']}")
        print(f"         URL: {feed['feed_url']}")
        print(f"         Always display enclosures: {flag}")


def cmd_add_feed(args):
    """Subscribe a feed."""
    feed_id = get_feed_storage().save_feed(
        args.title,
        args.url,
        always_display_enclosures=args.always_display
    )
    if feed_id is None:
        print(f"Feed already exists: {args.url}")
        sys.exit(1)
    print(f"Added feed {feed_id}: {args.title}")


def cmd_set_display(args):
    """Turn always_display_enclosures on or off for a feed."""
    value = args.value == "on"
    if not get_feed_storage().set_always_display(args.feed_id, value):
        print(f"Feed not found: {args.feed_id}")
        sys.exit(1)
    print(f"Feed {args.feed_id}: always_display_enclosures={args.value}")


def main():
    parser = argparse.ArgumentParser(
        description="Render feed-reader API records through the enclosure filter"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # render
    p = subparsers.add_parser("render", help="Render a JSON article or headline list")
    p.add_argument("file", nargs="?", help="JSON file (default: stdin)")
    p.add_argument("--kind", choices=["article", "headline"], default="article",
                   help="API call site for a single record")

    # feeds
    subparsers.add_parser("feeds", help="List feeds")

    # add-feed
    p = subparsers.add_parser("add-feed", help="Subscribe a feed")
    p.add_argument("title", help="Feed title")
    p.add_argument("url", help="Feed URL")
    p.add_argument("--always-display", action="store_true",
                   help="Always display enclosures for this feed")

    # set-display
    p = subparsers.add_parser("set-display", help="Change a feed's enclosure setting")
    p.add_argument("feed_id", type=int, help="Feed ID")
    p.add_argument("value", choices=["on", "off"], help="New setting")

    args = parser.parse_args()

    if args.command == "render":
        cmd_render(args)
    elif args.command == "feeds":
        cmd_feeds(args)
    elif args.command == "add-feed":
        cmd_add_feed(args)
    elif args.command == "set-display":
        cmd_set_display(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
