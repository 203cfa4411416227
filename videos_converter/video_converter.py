"""Video conversion to x265 through the external encoder."""

import logging
import os
import subprocess
import time
from pathlib import Path

from videos_converter.config_manager import ConfigManager
from videos_converter.data_models import ConversionResult, VideoFile
from videos_converter.errors import EncoderInvocationFailure
from videos_converter.file_processor import bytes_to_mebibytes


def partial_path(target_path: Path) -> Path:
    """Temporary path the encoder writes to before the result is moved in place."""
    return target_path.with_name(f".{target_path.name}")


class VideoConverter:
    """Converts MP4 files to x265 using FFmpeg."""

    def __init__(self, config: ConfigManager):
        """
        Initialize VideoConverter with the run configuration.

        Args:
            config: ConfigManager holding the fixed encoder settings
        """
        self.config = config
        logging.info(
            f"VideoConverter initialized with codec={config.VIDEO_CODEC}, "
            f"crf={config.CONSTANT_RATE_FACTOR}, preset={config.PRESET}"
        )

    def build_command(self, video: VideoFile) -> list:
        """
        Build the encoder command for a video.

        Args:
            video: Video to convert

        Returns:
            Command as a list of arguments
        """
        return self.config.encoder_arguments(
            str(video.source_path),
            str(partial_path(video.target_path))
        )

    def convert(self, video: VideoFile) -> ConversionResult:
        """
        Convert one video, blocking until the encoder exits.

        The encoder writes to a temporary file next to the target, which is
        renamed to the target path only when the encoder succeeded.

        Args:
            video: Video to convert

        Returns:
            ConversionResult with sizes and elapsed time

        Raises:
            EncoderInvocationFailure: If the encoder is missing, fails or
                produces no output file
        """
        temp_path = partial_path(video.target_path)
        if temp_path.exists():
            logging.warning(f"Removing leftover partial output: {temp_path}")
            temp_path.unlink()

        command = self.build_command(video)
        logging.info(f"Converting {video.name}")
        logging.debug(f"FFmpeg command: {' '.join(command)}")

        start_time = time.time()
        try:
            self._run_encoder(video, command)
            if not temp_path.exists():
                raise EncoderInvocationFailure(
                    video.source_path,
                    f"Encoder produced no output file: {temp_path}"
                )
            os.replace(temp_path, video.target_path)
        except BaseException:
            self._discard(temp_path)
            raise
        elapsed = time.time() - start_time

        generated_size = video.target_path.stat().st_size
        original_mib = bytes_to_mebibytes(video.size_bytes)
        generated_mib = bytes_to_mebibytes(generated_size)
        # Ratio of the printed (rounded) sizes
        if original_mib > 0:
            ratio = round(generated_mib / original_mib * 100, 2)
        else:
            ratio = 0.0

        logging.debug(f"Generated {video.target_path} ({generated_size} bytes) in {elapsed:.3f}s")
        return ConversionResult(
            original_size_mib=original_mib,
            generated_size_mib=generated_mib,
            ratio_percent=ratio,
            elapsed_seconds=round(elapsed, 3)
        )

    def _run_encoder(self, video: VideoFile, command: list) -> None:
        """Run the encoder and raise EncoderInvocationFailure on a non-zero exit."""
        try:
            result = subprocess.run(
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True
            )
        except OSError as e:
            logging.error(f"Could not start {command[0]}: {e}")
            raise EncoderInvocationFailure(
                video.source_path,
                f"Could not start {command[0]}: {e}"
            ) from e

        if result.returncode != 0:
            stderr = result.stderr or ""
            logging.error(f"FFmpeg failed for {video.name} with exit code {result.returncode}")
            logging.debug(f"FFmpeg stderr (last 500 chars): {stderr[-500:]}")
            raise EncoderInvocationFailure(
                video.source_path,
                f"{command[0]} exited with status {result.returncode}",
                returncode=result.returncode,
                stderr=stderr
            )

    def _discard(self, path: Path) -> None:
        """Remove a partial output file if the encoder left one behind."""
        try:
            path.unlink()
            logging.debug(f"Removed partial output: {path}")
        except FileNotFoundError:
            pass
