# vidconvert

Building blocks for a film conversion queue built around FFmpeg. The package
builds FFmpeg argument lists, reads the JSON that ffprobe prints, reads and
validates a configuration file, and offers a small command line that checks a
setup is usable.

It needs nothing beyond the Python standard library (Python 3.10 or later).

## Installation

```
pip install .
```

Tests:

```
pip install ".[test]"
pytest
```

## What is in the package

| Module | Contents |
| --- | --- |
| `vidconvert.data` | `Codec`, `Priority`, `HDRData`, `StreamData`, `Group`, `Film` records and `codec_description()` |
| `vidconvert.streams` | `Stream` and its kinds: `VideoCopy`, `AAC`, `AC3`, `EAC3`, `FDKAAC`, `Opus`, `AudioCopy`, `SubtitleCopy` (on top of `VideoStream`, `AudioStream`, `SubtitleStream`) |
| `vidconvert.hevc` | `HEVC` (libx265, 10-bit) and `HDR` master-display metadata, plus `DEFAULT_HDR` |
| `vidconvert.ffmpeg` | `FFmpegJob` and `convert_arguments()` |
| `vidconvert.ffprobe` | `FFprobe`, `ProbeStream`, `StreamType`, `Resolution`, `resolution_for_height()` |
| `vidconvert.configuration` | `parse_config_text()`, `ConfigurationBase`, `ConfigSyntaxError` |
| `vidconvert.appconfig` | `AppConfiguration`: the program's settings and their validation |
| `vidconvert.logger` | `Logger` and `Level`: timestamped, leveled messages appended to a file |
| `vidconvert.task` | `Task`, `Status`, `format_elapsed()` |
| `vidconvert.userinput` | `is_int()`, `to_int()`, `to_int_positive()`, `to_int_in_range()`, `parse_yes_no()` and friends, raising `InputError` |
| `vidconvert.display`, `vidconvert.colors`, `vidconvert.fsutils`, `vidconvert.helptext` | list formatting, ANSI colours, permission checks, help texts |
| `vidconvert.cli` | `parse_arguments()`, `resolve_configuration()`, `SelfTest` and `main()` |

## Library use

Building an FFmpeg command line:

```python
from vidconvert.ffmpeg import FFmpegJob, convert_arguments
from vidconvert.hevc import HEVC
from vidconvert.streams import Opus, SubtitleCopy

job = FFmpegJob(1, "Some Film/film.avi")
video = HEVC(0)
video.set_tune_animation()
job.add_stream(video)
audio = Opus(-1)          # -1 selects every audio stream
audio.set_channels(6)     # bitrate becomes 768k; surround is remapped to 5.1
job.add_stream(audio)
job.add_stream(SubtitleCopy(-1))

print(job.output_file())  # Some Film/film.mkv
args = convert_arguments(job, "/srv/films/in", "/srv/films/work", "my encoder")
```

`add_stream()` stores a copy of the stream and numbers it within its kind
(video, audio, subtitle). `convert_arguments()` returns the arguments to pass
after the `ffmpeg` program name: the input file, the common options, each
stream's `-map`/`-c`/rate options, metadata, attachment copying and finally the
output file inside the work folder.

HDR metadata goes on an `HEVC` stream through its `hdr` attribute, which
accepts an `HDR` or an `HDRData` record.

Reading ffprobe output you already have:

```python
from vidconvert.ffprobe import FFprobe, StreamType

probe = FFprobe()
probe.load_stream_data(json_text, StreamType.AUDIO)
for stream in probe.streams(StreamType.AUDIO):
    print(stream.codec_name, stream.language, stream.channels)
probe.load_video_resolution(resolution_json)
print(probe.resolution())          # e.g. Resolution.RES_1080P
probe.load_video_color(frame_json)
if probe.is_hdr_detected() or probe.is_hdr_factible():
    hdr = probe.get_hdr()          # DEFAULT_HDR when no metadata was found
```

Malformed or empty JSON is ignored; whatever could be read is kept.

## Command line

```
vidconvert --help
vidconvert --version
vidconvert --test --config my.conf
```

| Option | Meaning |
| --- | --- |
| `-t`, `--test` | Check that the configuration is valid and that the log file and the SQLite database can be opened |
| `-d`, `--daemon` | Accepted, but not available: the command reports so and exits with status 1 |
| `-a`, `--add <file>` | Accepted, but not available: the command reports so and exits with status 1 |
| `-c`, `--config <file>` | Configuration file instead of `/etc/conf.d/vidconvert.conf` |
| `-db`, `--database <file>` | Database file |
| `-i`, `--input <folder>` | Input folder |
| `-o`, `--output <folder>` | Output folder |
| `-w`, `--work <folder>` | Work folder |
| `-l`, `--logfile <file>` | Log file |
| `-ll`, `--loglevel <level>` | Lowest level written to the log, 0 (debug) to 5 (fatal) |
| `-s`, `--sleep <seconds>` | Non-negative number of seconds |
| `-p`, `--pause <seconds>` | Non-negative number of seconds |
| `-of`, `--onfinish <action>` | `move` or `copy` |
| `-v`, `--version` | Show the version |
| `-h`, `--help` | Show usage |

Unknown options are an error. Exactly one action among `--test`, `--daemon`
and `--add` must be given (the last one wins); `--help` and `--version` end
parsing at once. The exit status is 0 on success and 1 otherwise.

If the command line does not set every required setting, the configuration
file is read as well. Settings found in the file are then kept, and command
line values only fill in those the file leaves out. The result is validated;
any problems are printed per setting.

While `--test` runs, SIGINT and SIGTERM ask it to stop.

## Configuration file

The file uses libconfig syntax: `name = value;` (or `name: value`),
`#`, `//` and `/* */` comments, quoted strings, integers, and groups, arrays
and lists, though only top-level strings and integers are used:

```
database = "/var/lib/films/queue.db";
input    = "/srv/films/in";
output   = "/srv/films/out";
work     = "/srv/films/work";
logfile  = "/var/log/films.log";
loglevel = 2;
sleep    = 3600;
pause    = 60;
onfinish = "move";
```

`database`, `input`, `output`, `work` and `logfile` are required; `loglevel`,
`sleep` (default 3600), `pause` (default 60) and `onfinish` (default `move`)
are optional. Unknown settings are ignored. Validation requires `input`,
`output`, `work` and `database` to be existing, readable and writable
directories, the parent directories of `database` and `logfile` to be
readable and writable, integers to be non-negative, `loglevel` to be below 6
and `onfinish` to be `move` or `copy`.

## What the package does not do

- It never starts FFmpeg or ffprobe: it produces their arguments and reads
  JSON that you obtain yourself.
- It keeps no conversion queue. The `Film`, `StreamData` and `Group` records
  describe queue entries, but nothing stores or retrieves them; `--test` only
  opens the database file.
- There is no conversion daemon and no interactive adding of films: the
  `--daemon` and `--add` options are recognised but end with an error.