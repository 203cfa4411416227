from pathlib import Path

import pytest

from videos_converter.errors import DirectoryCreateFailure, DirectoryReadFailure
from videos_converter.file_processor import (
    FileProcessor,
    bytes_to_mebibytes,
    generate_target_filename,
    is_video,
)


@pytest.mark.parametrize("name, expected", [
    ("clip.mp4", True),
    ("clip.MP4", False),
    ("clip.mp4.backup", False),
    ("clip.mkv", False),
    ("mp4", False),
])
def test_is_video(name, expected):
    assert is_video(name) is expected


@pytest.mark.parametrize("name, expected", [
    ("clip.mp4", "clip_x265.mp4"),
    ("clip.mp4.backup.mp4", "clip_x265.mp4.backup.mp4"),
    ("clip_x265.mp4", "clip_x265_x265.mp4"),
    ("holiday 2018.mp4", "holiday 2018_x265.mp4"),
])
def test_generate_target_filename_replaces_first_occurrence(name, expected):
    assert generate_target_filename(name) == expected


def test_bytes_to_mebibytes():
    assert f"{bytes_to_mebibytes(1048576):.2f}" == "1.00"
    assert f"{bytes_to_mebibytes(1572864):.2f}" == "1.50"
    assert bytes_to_mebibytes(0) == 0.0


def test_ensure_output_directory_is_idempotent(tmp_path):
    output = tmp_path / "x265"
    processor = FileProcessor(tmp_path, output)
    processor.ensure_output_directory()
    processor.ensure_output_directory()
    assert output.is_dir()


def test_ensure_output_directory_propagates_other_failures(tmp_path):
    blocker = tmp_path / "x265"
    blocker.write_text("not a directory")
    processor = FileProcessor(tmp_path, blocker / "nested")
    with pytest.raises(DirectoryCreateFailure):
        processor.ensure_output_directory()


def test_list_entries_of_missing_folder(tmp_path):
    processor = FileProcessor(tmp_path / "missing", tmp_path / "x265")
    with pytest.raises(DirectoryReadFailure):
        processor.list_entries()


def test_find_videos_filters_by_extension(tmp_path):
    source = tmp_path / "videos"
    source.mkdir()
    (source / "a.mp4").write_bytes(b"a" * 10)
    (source / "b.mov").write_bytes(b"b")
    (source / "notes.txt").write_text("hello")
    (source / "folder.mp4").mkdir()

    videos = FileProcessor(source, Path("x265")).find_videos()

    assert [video.name for video in videos] == ["a.mp4"]
    video = videos[0]
    assert video.source_path.is_absolute()
    assert video.source_path == (source / "a.mp4").absolute()
    assert video.target_path == Path("x265") / "a_x265.mp4"
    assert video.size_bytes == 10
