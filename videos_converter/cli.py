"""Command-line entry point of the videos converter."""

import logging
import sys
from typing import List, Optional

from videos_converter.batch_converter import BatchConverter
from videos_converter.config_manager import USAGE, ConfigManager
from videos_converter.errors import ConfigurationError, ConverterError
from videos_converter.file_processor import FileProcessor
from videos_converter.stats_tracker import StatsTracker
from videos_converter.video_converter import VideoConverter


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the videos converter."""
    # Initialize logging configuration
    logging.basicConfig(
        level=logging.INFO,
        format='[%(asctime)s] [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logger = logging.getLogger(__name__)
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = ConfigManager(argv)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1

    print(f"Listing and converting all the video files in the '{config.invocation.source_spec}' directory...")

    try:
        file_processor = FileProcessor(config.source_directory, config.output_directory)
        file_processor.ensure_output_directory()

        reporter = StatsTracker(config)
        batch = BatchConverter(file_processor, VideoConverter(config), reporter)
        stats = batch.run()

        reporter.print_summary(stats)

    except KeyboardInterrupt:
        logger.error("Interrupted, stopping after cleaning up the current conversion")
        return 130
    except ConverterError as e:
        logger.error(f"Fatal error: {e}")
        return 1
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        return 1

    if stats.failure_count > 0:
        logger.warning(f"{stats.failure_count} conversions failed")
        return 1
    return 0
