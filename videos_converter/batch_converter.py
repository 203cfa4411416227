"""Conversion loop over the videos of one folder."""

import logging
import time

from videos_converter.data_models import RunStatistics, VideoFile
from videos_converter.errors import EncoderInvocationFailure
from videos_converter.file_processor import FileProcessor, bytes_to_mebibytes
from videos_converter.stats_tracker import StatsTracker
from videos_converter.video_converter import VideoConverter


class BatchConverter:
    """Skips or converts every video of the source folder, one at a time."""

    def __init__(
        self,
        file_processor: FileProcessor,
        converter: VideoConverter,
        reporter: StatsTracker
    ):
        self.file_processor = file_processor
        self.converter = converter
        self.reporter = reporter

    def run(self) -> RunStatistics:
        """
        Process every video of the source folder once, in listing order.

        Returns:
            RunStatistics accumulated over the run

        Raises:
            DirectoryReadFailure: If the source folder cannot be listed
        """
        stats = RunStatistics()
        start_time = time.time()

        for video in self.file_processor.find_videos():
            stats.video_count += 1
            self._process(video, stats)

        stats.total_elapsed_seconds = round(time.time() - start_time, 3)
        return stats

    def _process(self, video: VideoFile, stats: RunStatistics) -> None:
        index = stats.video_count
        target = video.target_path.as_posix()

        if video.target_path.exists():
            size = self.file_processor.get_file_size(video.target_path)
            logging.info(f"Skipping {video.name}: {target} already exists")
            self.reporter.report_existing(index, target, bytes_to_mebibytes(size))
            return

        try:
            result = self.converter.convert(video)
        except EncoderInvocationFailure as e:
            stats.failure_count += 1
            logging.error(f"Conversion failed for {video.name}: {e}")
            self.reporter.report_failure(index, video.name, str(e))
            return

        stats.conversion_count += 1
        logging.info(f"Conversion completed successfully for {video.name}")
        self.reporter.report_conversion(index, target, result)
