"""
soundcloud-search - print the titles of tracks matching a query.
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from soundcloud_client.core.config import settings
from soundcloud_client.core.errors import SoundCloudError
from soundcloud_client.services.client import SoundCloudClient

log = logging.getLogger("soundcloud_client.main")


# ========================= Logging Configuration =========================

class ColoredFormatter(logging.Formatter):
    grey = "\x1b[38;21m"
    blue = "\x1b[34m"
    yellow = "\x1b[33m"
    red = "\x1b[31m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    COLORS = {
        logging.DEBUG: grey,
        logging.INFO: blue,
        logging.WARNING: yellow,
        logging.ERROR: red,
        logging.CRITICAL: bold_red
    }

    def format(self, record):
        log_color = self.COLORS.get(record.levelno, self.grey)
        record.levelname = f"{log_color}{record.levelname}{self.reset}"
        return super().format(record)


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None):
    log_level = (level or settings.log_level).upper()
    numeric_level = getattr(logging, log_level, logging.INFO)

    # Log lines go to stderr so stdout carries only the track titles.
    console_handler = logging.StreamHandler(sys.stderr)
    if sys.stderr.isatty():
        console_handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    else:
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(console_handler)
    root_logger.setLevel(numeric_level)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)


# ========================= Main =========================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="soundcloud-search",
        description="Search SoundCloud tracks and print their titles.",
    )
    parser.add_argument("query", help="free text search")
    parser.add_argument("--client-id", default=None,
                        help="application client id (default: $SOUNDCLOUD_CLIENT_ID)")
    parser.add_argument("--genre", action="append", dest="genres", default=None)
    parser.add_argument("--tag", action="append", dest="tags", default=None)
    parser.add_argument("--log-level", default=None)
    return parser


async def search(client: SoundCloudClient, query: str,
                 genres: Optional[List[str]] = None, tags: Optional[List[str]] = None) -> List[str]:
    tracks = await client.tracks().query(query).genres(genres).tags(tags).get()
    return [track.title for track in tracks]


async def _run(args: argparse.Namespace) -> int:
    async with SoundCloudClient(args.client_id) as client:
        try:
            titles = await search(client, args.query, args.genres, args.tags)
        except SoundCloudError as e:
            log.error("Search failed: %s", e)
            return 1

    if not titles:
        print("no tracks found")
    for title in titles:
        print(title)
    return 0


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    if not (args.client_id or settings.client_id):
        log.error("No client id: pass --client-id or set SOUNDCLOUD_CLIENT_ID")
        return 2

    if sys.platform != "win32":
        import uvloop
        return uvloop.run(_run(args))
    return asyncio.run(_run(args))


if __name__ == "__main__":
    sys.exit(run())
