"""File system operations for the videos conversion workflow."""

import logging
from pathlib import Path
from typing import List

from videos_converter.config_manager import ConfigManager
from videos_converter.data_models import VideoFile
from videos_converter.errors import DirectoryCreateFailure, DirectoryReadFailure


def is_video(filename: str) -> bool:
    """Tell whether a file name carries the video extension (case-sensitive)."""
    return filename.endswith(ConfigManager.VIDEO_EXTENSION)


def generate_target_filename(filename: str, addition: str = ConfigManager.FILENAME_ADDITION) -> str:
    """
    Derive the converted file name from a source file name.

    Only the first occurrence of the extension is rewritten, wherever it is
    in the name: "a.mp4.b.mp4" becomes "a_x265.mp4.b.mp4".

    Args:
        filename: Name of the source video
        addition: Text inserted before the extension

    Returns:
        The target file name
    """
    extension = ConfigManager.VIDEO_EXTENSION
    return filename.replace(extension, f"{addition}{extension}", 1)


def bytes_to_mebibytes(size_bytes: int) -> float:
    """Convert a size in bytes to MiB, rounded to two decimals."""
    return round(size_bytes / 1024 / 1024, 2)


class FileProcessor:
    """Manages file system operations for the conversion workflow."""

    def __init__(self, input_dir: Path, output_dir: Path):
        """
        Initialize FileProcessor with input and output directory paths.

        Args:
            input_dir: Path to the folder holding the videos to convert
            output_dir: Path to the directory receiving converted files
        """
        self.input_dir = input_dir
        self.output_dir = output_dir

    def ensure_output_directory(self) -> Path:
        """
        Create the output directory unless it already exists.

        Returns:
            Path to the output directory

        Raises:
            DirectoryCreateFailure: On any error other than the directory existing
        """
        try:
            self.output_dir.mkdir(exist_ok=True)
        except OSError as e:
            logging.error(f"Failed to create output directory {self.output_dir}: {e}")
            raise DirectoryCreateFailure(self.output_dir, str(e)) from e

        logging.info(f"Output directory ready: {self.output_dir}")
        return self.output_dir

    def list_entries(self) -> List[Path]:
        """
        List the entries of the input directory, in listing order.

        Returns:
            List of Path objects, one per directory entry

        Raises:
            DirectoryReadFailure: If the input directory cannot be listed
        """
        try:
            entries = list(self.input_dir.iterdir())
        except OSError as e:
            logging.error(f"Failed to list {self.input_dir}: {e}")
            raise DirectoryReadFailure(self.input_dir, str(e)) from e

        logging.debug(f"Found {len(entries)} entries in {self.input_dir}")
        return entries

    def find_videos(self) -> List[VideoFile]:
        """
        Find the videos of the input directory (non-recursive).

        Returns:
            List of VideoFile objects in listing order
        """
        videos = []
        for entry in self.list_entries():
            if not is_video(entry.name) or not entry.is_file():
                logging.debug(f"Ignoring {entry.name}")
                continue

            videos.append(VideoFile(
                name=entry.name,
                source_path=entry.absolute(),
                target_path=self.output_dir / generate_target_filename(entry.name),
                size_bytes=self.get_file_size(entry)
            ))

        logging.info(f"Found {len(videos)} videos in {self.input_dir}")
        return videos

    def get_file_size(self, path: Path) -> int:
        """
        Return the size of a file in bytes.

        Args:
            path: Path to the file

        Returns:
            Size in bytes
        """
        size = path.stat().st_size
        logging.debug(f"{path.name} size: {size} bytes")
        return size
