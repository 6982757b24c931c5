# pipexpy

Run a chain of commands the way a shell runs `< infile cmd1 | cmd2 > outfile`,
with the files and commands given as plain arguments. POSIX systems only.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## The `pipex` command

Exactly two commands between an input file and an output file:

    pipex infile "grep apple" "wc -l" outfile

This behaves like:

    < infile grep apple | wc -l > outfile

Each command is split on spaces (runs of spaces count as one); the first
word is looked up in the directories of `PATH`, in order, unless it is an
absolute path to an executable. The output file is created (mode 0777,
subject to the umask) or truncated.

If the input file cannot be opened, the error is reported and the second
command still runs, reading empty input. If the output file cannot be
opened, the first command is run with its output discarded and the program
then fails. The exit status is that of the last command.

## The `pipex-bonus` command

Any number of commands:

    pipex-bonus infile "cat" "sort" "uniq -c" outfile

Here-document input, appending to the output file:

    pipex-bonus here_doc END "cat" "wc -l" outfile

Lines are read from standard input after a `heredoc> ` prompt until a line
holding only the limiter (`END` above) or the end of input; the output file
is appended to rather than truncated. At least two commands are needed in
this form.

A typed second command, when the third argument starts with `|`:

    pipex-bonus infile "cat" "|"

The program prints `pipex >` and reads one line of the form
`cmd2 words ... outfile`: the last word is the output file, the words
before it, with surrounding quotes and spaces removed, make up the second
command. The result then runs as `pipex infile cat cmd2 outfile` would.

When there are five or more arguments and the third starts with `|`, as in

    pipex-bonus infile "cat" "|" "wc -l" outfile

the `|` is skipped and the run is that of `pipex infile cat "wc -l" outfile`.

## Exit status and messages

| Situation                         | Message on stderr              | Status |
|-----------------------------------|--------------------------------|--------|
| wrong number of arguments         | `invalid number of arguaments` | 2      |
| file cannot be opened             | `no such file or directory`    | 1      |
| file exists but cannot be read    | `permission denied`            | 126    |
| command empty or not on `PATH`    | `command not found`            | 127    |

A command that cannot be found is reported and given status 127; the
command after it reads empty input and the pipeline goes on. In
`pipex-bonus` with an input file, any failure to open either file is
reported as `no such file or directory`.

## Using it from Python

    from pipexpy.cli import run
    status = run(["infile", "grep apple", "wc -l", "outfile"])

- `pipexpy.cli.run(args, env=None)` and `pipexpy.bonus.run_bonus(args, env=None, stdin=None, prompt=None)`
  return the exit status and raise on failure; `main(argv=None)` in either
  module prints the message and returns the status instead.
- `pipexpy.pipeline.run_pipeline(commands, stdin=None, stdout=None, env=None)`
  chains command strings between two file descriptors or files and returns
  the exit status of each command; `open_infile(path)` and
  `open_outfile(path, append=False)` open the end files.
- `pipexpy.command.resolve_command(text, env=None)` returns the executable
  path and argument list for a command string; `find_executable` and
  `parse_command` do each half.
- `pipexpy.bonus.read_heredoc(limiter, stream=None, prompt=None)` collects
  here-document text; `rewrite_manual_pipe(args, line)` builds the argument
  list for the typed-pipe form.
- `pipexpy.lines.LineReader(stream, buffer_size=42)` reads a text or binary
  stream one line at a time, newline included.
- `pipexpy.textutil.split_fields` and `trim` are the splitting and trimming
  helpers.

Errors are raised as subclasses of `pipexpy.errors.PipexError`
(`CommandNotFoundError`, `NoSuchFileError`, `PermissionDeniedError`,
`ArgumentCountError`), each with an `exit_status` and the `diagnostic`
text written to standard error.

## What it does not do

Commands are not parsed by a shell: there is no quoting, escaping, globbing,
variable expansion or redirection inside a command string; a command is
only split on spaces.