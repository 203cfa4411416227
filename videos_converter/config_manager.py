"""Invocation handling and fixed encoder settings for the videos converter."""

import logging
from pathlib import Path
from typing import List, Sequence

from videos_converter.data_models import Invocation
from videos_converter.errors import InvalidArgumentCount


USAGE = "Usage: videos-converter <folderContainingTheVideosToConvert> [<outputDir>]"


def resolve_invocation(args: Sequence[str]) -> Invocation:
    """
    Validate the positional arguments and build an Invocation.

    Args:
        args: Positional arguments, without the program name

    Returns:
        Invocation with the source folder and output directory name

    Raises:
        InvalidArgumentCount: If there are no arguments or more than two
    """
    if len(args) == 0 or len(args) > 2:
        logging.debug(f"Rejecting arguments: {list(args)}")
        raise InvalidArgumentCount(len(args))

    source_spec = args[0]
    output_dir_name = ConfigManager.DEFAULT_OUTPUT_DIR_NAME
    if len(args) == 2 and args[1]:
        output_dir_name = args[1]

    return Invocation(source_spec=source_spec, output_dir_name=output_dir_name)


class ConfigManager:
    """Holds the invocation of a run and the fixed encoder settings."""

    # CRF ranges from 0 (lossless) to 51 (worst); +6 roughly halves the size
    ENCODER = "ffmpeg"
    VIDEO_CODEC = "libx265"
    CONSTANT_RATE_FACTOR = 23
    AUDIO_CODEC = "aac"
    AUDIO_BITRATE = "128k"
    PRESET = "slow"

    DEFAULT_OUTPUT_DIR_NAME = "x265"
    FILENAME_ADDITION = "_x265"
    VIDEO_EXTENSION = ".mp4"

    def __init__(self, args: Sequence[str]):
        """
        Initialize ConfigManager from the positional arguments.

        Args:
            args: Positional arguments, without the program name

        Raises:
            InvalidArgumentCount: If the argument count is not 1 or 2
        """
        self._invocation = resolve_invocation(args)
        logging.debug(f"Invocation resolved: {self._invocation}")

    @property
    def invocation(self) -> Invocation:
        """Get the validated invocation."""
        return self._invocation

    @property
    def source_directory(self) -> Path:
        """Get the source folder as a Path object."""
        return Path(self._invocation.source_spec)

    @property
    def output_directory(self) -> Path:
        """Get the output directory as a Path object."""
        return Path(self._invocation.output_dir_name)

    def encoder_arguments(self, source: str, output: str) -> List[str]:
        """Build the full encoder command for one input and one output path."""
        return [
            self.ENCODER,
            "-i", source,
            "-c:v", self.VIDEO_CODEC,
            "-crf", str(self.CONSTANT_RATE_FACTOR),
            "-c:a", self.AUDIO_CODEC,
            "-b:a", self.AUDIO_BITRATE,
            "-preset", self.PRESET,
            output
        ]

    def command_line_template(self) -> str:
        """Return the encoder command with placeholders for the file names."""
        arguments = self.encoder_arguments(
            "<fileName>",
            f"{self._invocation.output_dir_name}/<targetFilename>"
        )
        return " ".join(arguments)
