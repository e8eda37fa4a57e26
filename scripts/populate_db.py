"""Load the clip metadata file into the phrase database."""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sqlalchemy.exc import SQLAlchemyError

from src.config import settings
from src.ingestion.loader import load_metadata
from src.search.index import PhraseIndex
from src.search.storage import Database

logger = logging.getLogger("populate_db")


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--metadata", default=settings.metadata_path)
    parser.add_argument("--database-url", default=settings.database_url)
    parser.add_argument(
        "--rebuild", action="store_true", help="Replace the existing corpus instead of appending"
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    with Database(args.database_url) as database:
        index = PhraseIndex(database)
        try:
            inserted = load_metadata(index, Path(args.metadata), rebuild=args.rebuild)
        except FileNotFoundError as e:
            logger.error("%s (run process_clips.py first)", e)
            return 1
        except (ValueError, SQLAlchemyError) as e:
            logger.error("Load failed, nothing was inserted: %s", e)
            return 1

    logger.info("Inserted %d phrases into %s", inserted, args.database_url)
    return 0


if __name__ == "__main__":
    sys.exit(main())
