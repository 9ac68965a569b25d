# logdrill

`logdrill` pulls the lines you care about out of a log file. You give it
regular expressions to find, include and exclude. It writes the selected
entries to an output file, one per line. It can also serve that output file
over a small HTTP server and re-read the log on a fixed interval.

## Installation

```
pip install .
```

This installs the `logdrill` command. It needs nothing beyond the Python
standard library.

## Usage

```
logdrill -l auth.log -f "Failed password" -o failures.txt
```

### Options

| Option | Meaning | Default |
| --- | --- | --- |
| `-f`, `--elem-to-find` | Pattern to search for. Required and must not be empty. | |
| `-l`, `--logfile` | Log file to analyse. Required. The file must exist. | |
| `-i`, `--include-regex` | A second pattern. A line is selected if it matches `-f` or `-i`. | unset |
| `-e`, `--exclude-regex` | Lines matching this pattern are never selected. | unset |
| `-m`, `--match-only` | Keep only the parts of each `-f`/`-i` match that also match this pattern. | unset |
| `-s`, `--strict` | `true` keeps each `-f`/`-i` match instead of the whole line. | `false` |
| `-d`, `--duplicate` | `false` drops repeated entries. | `true` |
| `-o`, `--output` | Output file. | `output.txt` |
| `--erase` | `false` changes how an existing output file is written (see below). | `true` |
| `-w`, `--webserver` | `true` serves the output file over HTTP. | `false` |
| `--ip` | IPv4 address the web server listens on. | `254.254.254.254` |
| `--port` | Port for the web server, 1 to 65534. Must be given with `-w true`. | `0` |
| `--parsing-time` | Seconds between re-reads of the log while serving. | `3600` |

Boolean options take the literal values `true` or `false`.

Patterns use Python's `re` syntax and are searched anywhere in a line.
Lines are read as UTF-8; a line that cannot be decoded is skipped with a
message on standard error.

Rules checked before any work is done:

- `--strict true` and `--match-only` cannot be used together.
- The output and log file names must not contain any of
  `/ \ = : * ? " ' , ; ! { } [ ] ( ) < > |`, so both files are named
  relative to the current directory.
- With `-w true`, `--ip` must be a numeric IPv4 address and `--port` must be
  set.

On any of these errors, an invalid pattern, or a file that cannot be read or
written, the command prints a message starting with `Error !` and exits with
status 1.

### How the output file is written

- `--erase true` (the default): the output file is replaced by the selected
  entries, one per line.
- `--erase false --duplicate false`: the output file is replaced by the
  selected entries with repeats removed.
- `--erase false --duplicate true`: the new entries are not written. The
  output file (created empty if missing) is rewritten with its existing lines
  joined together without line breaks.

### Examples

Keep only the IP addresses from failed SSH logins, with no repeats:

```
logdrill -l auth.log -f "Failed password.*" -m "[0-9]+\.[0-9]+\.[0-9]+\.[0-9]+" -d false -o ips.txt
```

Re-read the log every five minutes and serve the result:

```
logdrill -l auth.log -f "Failed password" -o ips.txt -w true --ip 127.0.0.1 --port 8080 --parsing-time 300
```

## The web server

With `-w true`, the log is parsed and saved once, then the output file is
served at `http://<ip>:<port>/<output>`, for example
`http://127.0.0.1:8080/ips.txt`.

- `GET` on that path returns the file as `text/plain`. If the file cannot be
  read, the answer is `404` with the body `Fichier introuvable`.
- Other methods on that path get `405`; any other path gets `404`.
- Every `--parsing-time` seconds the log is parsed again with the same
  options and the output file is rewritten. If that fails, the server stops
  and the command exits with an error.
- The server runs until interrupted with Ctrl-C.

## Using it from Python

```python
from logdrill.files import save_file
from logdrill.parser import ParseJob, parse_log

entries = parse_log("auth.log", "Failed password", strict=True, duplicate=False)
save_file("output.txt", entries, True, False)

job = ParseJob(filename="auth.log", elem_to_find="sshd", exclude_regex="Accepted")
print(job.run())
```

- `logdrill.parser.parse_log` and `ParseJob.run` return the selected entries
  as a list of strings, in file order.
- `logdrill.files.save_file(filename, lines, erase_file, duplicate)` writes
  them as described above; `open_log(filename, required)` opens a file for
  binary reading, creating it empty when it is missing and not required.
- `logdrill.sanitizer` holds the checks the command runs; they raise
  `SanitizeError` (a `ValueError`).
- `logdrill.web_server.launch_server` runs the HTTP server with periodic
  re-parsing; `read_output`, `make_handler` and `start_reparser` are its
  building blocks.
- `logdrill.cli.main(argv=None)` runs the command and returns its exit
  status.

## What it does not do

- The web server listens on IPv4 only, speaks plain HTTP without
  authentication, and serves only the one output file.
- Log files are read whole on every pass; there is no following of a growing
  file between passes.