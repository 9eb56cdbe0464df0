[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vidconvert"
version = "0.1.0"
description = "Building blocks for an FFmpeg film conversion queue: stream parameters, HDR10 metadata, ffprobe JSON reading, configuration and a command line check"
requires-python = ">=3.10"
dependencies = []
keywords = ["ffmpeg", "ffprobe", "hevc", "x265", "hdr", "video", "conversion", "transcoding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video :: Conversion",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vidconvert = "vidconvert.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vidconvert"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
