"""Data models and dataclasses for the videos converter."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Invocation:
    """Validated command-line arguments of one run."""
    source_spec: str
    output_dir_name: str


@dataclass
class VideoFile:
    """A recognized video of the source folder and where its conversion goes."""
    name: str
    source_path: Path  # absolute
    target_path: Path  # <output dir>/<target filename>
    size_bytes: int


@dataclass
class ConversionResult:
    """Sizes and timing of one finished conversion."""
    original_size_mib: float
    generated_size_mib: float
    ratio_percent: float
    elapsed_seconds: float


@dataclass
class RunStatistics:
    """Counters accumulated by the conversion loop over a whole run."""
    video_count: int = 0
    conversion_count: int = 0
    failure_count: int = 0
    total_elapsed_seconds: float = 0.0

    @property
    def attempted_count(self) -> int:
        """Number of videos for which the encoder was run."""
        return self.conversion_count + self.failure_count
