"""Report lines and end-of-run summary for conversion operations."""

import logging

from videos_converter.config_manager import ConfigManager
from videos_converter.data_models import ConversionResult, RunStatistics


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


class StatsTracker:
    """Prints per-video report lines and the final summary to stdout."""

    def __init__(self, config: ConfigManager):
        """
        Initialize StatsTracker.

        Args:
            config: ConfigManager of the run, used for the command line echo
        """
        self.config = config

    def report_existing(self, index: int, target: str, size_mib: float) -> None:
        """Report a video whose converted file is already present."""
        print(f"{index}: The file {target} ({size_mib:.2f}Mio) already exists!")

    def report_conversion(self, index: int, target: str, result: ConversionResult) -> None:
        """Report a finished conversion with its sizes and duration."""
        print(
            f"{index}: {target} "
            f"({result.original_size_mib:.2f}Mio -> {result.generated_size_mib:.2f}Mio, "
            f"{result.ratio_percent:.2f}%) "
            f"generated in {result.elapsed_seconds:.3f} seconds."
        )

    def report_failure(self, index: int, source: str, reason: str) -> None:
        """Report a video the encoder could not convert."""
        print(f"{index}: Failed to convert {source}: {reason}")

    def print_summary(self, stats: RunStatistics) -> None:
        """Display the summary message matching the run statistics."""
        if stats.attempted_count == 0:
            if stats.video_count == 0:
                print("No video files were converted. None were found.")
            else:
                print(
                    f"No new video files were converted. "
                    f"The {stats.video_count} existing ones were already converted."
                )
        else:
            print(
                f"{_plural(stats.conversion_count, 'video')} converted "
                f"in {stats.total_elapsed_seconds:.3f} seconds."
            )
            if stats.failure_count > 0:
                print(f"{_plural(stats.failure_count, 'video')} failed to convert.")
            print(f"Command line used: `{self.config.command_line_template()}`")

        logging.info(
            f"Statistics: {stats.video_count} videos, "
            f"{stats.conversion_count} converted, "
            f"{stats.failure_count} failed, "
            f"runtime: {stats.total_elapsed_seconds:.3f}s"
        )
