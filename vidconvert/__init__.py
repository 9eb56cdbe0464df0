"""FFmpeg conversion building blocks: stream arguments, ffprobe JSON reading, configuration and a command line check."""

__version__ = "0.1.0"