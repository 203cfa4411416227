#!/usr/bin/env python3
"""
Videos to x265 Converter
Main entry point: converts every MP4 video of a folder to x265 with FFmpeg.
"""

import sys

from videos_converter.cli import main


if __name__ == "__main__":
    sys.exit(main())
