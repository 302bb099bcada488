"""
YouTube Channel Feed - Command Line Entry
Builds the feed of a channel's recent uploads and prints it as JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from feed_pipeline.core.config import AppConfig, ConfigLoader, ConfigValidationError, ConfigurationMissingError
from feed_pipeline.core.errors import (
    ChannelNotFoundError,
    FeedError,
    InvalidIdentifierError,
    UpstreamError,
)
from feed_pipeline.core.feed import ChannelFeed, ChannelFeedBuilder
from feed_pipeline.core.youtube import parse_channel_ref


def setup_logging(log_dir: Path) -> logging.Logger:
    """Configure logging with file and console handlers."""
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "feed.log"

    # Console output goes to stderr so stdout stays valid JSON
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.FileHandler(log_file, mode='a', encoding='utf-8'),
            logging.StreamHandler(sys.stderr)
        ]
    )

    return logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="yt-channel-feed",
        description="Build a feed of a YouTube channel's recent uploads."
    )
    parser.add_argument("channel", help="Channel id (UC...), legacy username, @handle or channel URL")
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML configuration file")
    parser.add_argument("--no-embed", action="store_true", help="Do not embed the video player in item descriptions")
    parser.add_argument("--log-dir", type=Path, default=Path("logs"), help="Directory for feed.log")
    return parser.parse_args(argv)


def load_configuration(logger: logging.Logger, config_path: Optional[Path]) -> AppConfig:
    """Load and validate application configuration."""
    if config_path:
        logger.info(f"Loading configuration from: {config_path}")

    try:
        config = ConfigLoader(config_path).load()
        logger.info(f"Configuration validated successfully: {config!r}")
        return config
    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e}")
        sys.exit(1)
    except ConfigurationMissingError as e:
        logger.error(str(e))
        sys.exit(1)
    except ConfigValidationError as e:
        logger.error(f"Configuration validation failed: {e}")
        sys.exit(1)


async def build_feed(builder: ChannelFeedBuilder, channel: str, embed: bool) -> ChannelFeed:
    return await builder.build(parse_channel_ref(channel), embed=embed)


def main(argv: Optional[List[str]] = None) -> None:
    """Main execution entry for the channel feed."""
    args = parse_args(argv)
    logger = setup_logging(args.log_dir)

    config = load_configuration(logger, args.config)
    embed = config.embed_videos and not args.no_embed

    try:
        # API discovery blocks, so it happens before the event loop starts
        builder = ChannelFeedBuilder.from_config(config)
        feed = asyncio.run(build_feed(builder, args.channel, embed))
    except InvalidIdentifierError as e:
        logger.error(f"Invalid channel identifier: {e}")
        sys.exit(1)
    except ChannelNotFoundError as e:
        logger.error(f"Channel not found: {e}")
        sys.exit(1)
    except UpstreamError as e:
        logger.error(f"Upstream request failed: {e}")
        sys.exit(1)
    except FeedError as e:
        logger.error(f"Feed generation failed: {e}")
        sys.exit(1)

    logger.info(f"Feed complete: {feed.title} ({len(feed.items)} items)")
    print(json.dumps(feed.to_dict(), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
