#!/usr/bin/env python3
"""
YouTube Channel Browser

Loads videos or playlists of a channel page by page.
Supports configuration via config.yaml and environment variables.
"""

import logging
import sys

from tubepager.channel import ChannelCompact
from tubepager.config import Config
from tubepager.constants import TabKind
from tubepager.errors import TubePagerError
from tubepager.http_client import HTTPClient
from tubepager.logger_config import setup_logging


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv

    # Load configuration
    config = Config()

    # Setup logging
    log_file = config.get('logging.log_file', '')
    setup_logging(
        log_level=config.get('logging.level', 'INFO'),
        log_file=log_file if log_file else None,
        verbose=config.get_bool('logging.verbose', False),
    )
    logger = logging.getLogger(__name__)

    channel_id = argv[0] if argv else config.get('browse.channel_id', '')
    kind_name = config.get('browse.kind', 'videos')
    count = config.get_int('browse.count', 1)

    if not channel_id:
        logger.error("❌ Channel ID not configured!")
        logger.error("   Pass it as the first argument or set browse.channel_id in config.yaml")
        return 1

    try:
        kind = TabKind(str(kind_name).lower())
    except ValueError:
        logger.error(f"❌ Unknown browse.kind '{kind_name}', expected 'videos' or 'playlists'")
        return 1

    logger.info("=" * 80)
    logger.info("📺 YouTube Channel Browser")
    logger.info("=" * 80)
    logger.info(f"Channel: {channel_id}")
    logger.info(f"Tab: {kind.value}")
    logger.info(f"Pages: {count if count else 'all'}")
    logger.info("=" * 80)

    client = HTTPClient.from_config(config)
    channel = ChannelCompact(client=client, id=channel_id)

    try:
        if kind is TabKind.VIDEOS:
            loaded = channel.next_videos(count)
        else:
            loaded = channel.next_playlists(count)
    except KeyboardInterrupt:
        logger.warning("\n\n⚠️  Interrupted by user")
        return 130
    except TubePagerError as e:
        logger.error(f"❌ Browsing failed: {e}")
        return 1

    for idx, item in enumerate(loaded, 1):
        logger.info(f"  [{idx}/{len(loaded)}] {item.title} - {item.url}")

    logger.info(f"\n✅ Loaded {len(loaded)} {kind.value} from {channel.url}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
