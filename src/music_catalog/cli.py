"""
Music Catalog - entry point

Loads the configuration and the track catalog, then serves the site with
uvicorn. Each startup stage that can fail exits with its own status:

    1  cannot open config
    2  cannot read config
    3  cannot parse config
    4  cannot load catalog
"""

import argparse
import dataclasses
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from music_catalog import __version__
from music_catalog.core.config import DEFAULT_CONFIG_FILE, Config, ConfigError, load_config
from music_catalog.core.output import setup_loguru
from music_catalog.domain.library import Catalog, CatalogLoadError, TrackStore

EXIT_CATALOG_LOAD = 4


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="music-catalog",
        description="Self-hosted catalog site for audio tracks",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_FILE),
        help=f"Path to the JSON config file (default: {DEFAULT_CONFIG_FILE})",
    )
    parser.add_argument("--host", help="Override the listen address")
    parser.add_argument("--port", type=int, help="Override the listen port")
    parser.add_argument("--data-dir", type=Path, help="Override the track data directory")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def apply_overrides(config: Config, args: argparse.Namespace) -> Config:
    """Pure function - command-line values take precedence over the config file."""
    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if args.data_dir:
        overrides["data_dir"] = args.data_dir
    return dataclasses.replace(config, **overrides) if overrides else config


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Console logging until the config says otherwise
    setup_loguru()

    try:
        config = apply_overrides(load_config(args.config), args)
    except ConfigError as e:
        logger.error(str(e))
        return e.exit_code

    setup_loguru(config.log_level, config.log_file)
    logger.info(
        f"Config: host={config.host} port={config.port} "
        f"data_dir={config.data_dir} admin={config.admin_username!r}"
    )

    try:
        catalog = Catalog(TrackStore(config.data_dir).load_all())
    except CatalogLoadError as e:
        logger.error(str(e))
        return EXIT_CATALOG_LOAD

    import uvicorn

    from web.backend.main import create_app

    app = create_app(config, catalog=catalog)
    uvicorn.run(app, host=config.host, port=config.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
