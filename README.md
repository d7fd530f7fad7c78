# dasel

Building blocks of the `dasel` tool: the conditions used inside dynamic
selectors, parsing of typed values given on the command line, the error
types raised while resolving selectors, and a self-updater that fetches the
latest release and replaces the running executable.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `dasel` command has one sub-command, `update`, and a version option.

Print the version:

```
dasel --version
```

The version is `development`, followed by `-<installed version>` when the
package is installed (for example `development-1.24.0`).

Update to the latest release. Development builds are skipped unless
`--dev` is given:

```
dasel update
dasel update --dev
```

`update` needs to know where releases are published. Set
`DASEL_UPDATE_OWNER` to the owner of the release repository and,
optionally, `DASEL_UPDATE_REPO` to its name (the default is `dasel`):

```
DASEL_UPDATE_OWNER=someone dasel update
```

Errors are printed to standard error as `Error: <message>` and the command
exits with status 1. Running `dasel` with no sub-command prints the help.

## Library use

### Typed values

```python
from dasel.values import parse_value, get_map_from_types_values, ValueParseError

parse_value("27", "int")        # 27
parse_value("yes", "bool")      # True
parse_value("Tom", "string")    # "Tom"

get_map_from_types_values(["string", "int"], ["name=Tom", "age=27"])
# {"name": "Tom", "age": 27}

try:
    parse_value("a", "bool")
except ValueParseError as err:
    print(err)  # could not parse bool [a]: unhandled value
```

Accepted types are `string`/`str`, `int`/`integer` and `bool`/`boolean`,
in any case. Integers must fit in 64 bits. Booleans accept `true`, `t`,
`yes`, `y`, `1` and `false`, `f`, `no`, `n`, `0`, in any case.
`get_map_from_types_values` needs exactly one type per value; each value is
split at its first `=` into a name and the text to parse.

`should_read_from_stdin(file_flag)` is true for `""`, `stdin` and `-`;
`should_write_to_stdout(file_flag, out_flag)` is true when the output flag
is `stdout` or `-`, or when it is empty and input comes from standard input.

### Conditions

Conditions in `dasel.conditions` decide whether a value matches inside a
dynamic selector. Values are compared by their string form, as produced by
`format_value` (`true`/`false`, `<nil>`, `map[a:1]`, `[1 2]`, ...).

```python
from dasel.conditions import EqualCondition, KeyEqualCondition, SortedComparisonCondition

EqualCondition(key="value", value="Tom").check("Tom")            # True
EqualCondition(key="name", value="Tom").check({"name": "Tom"})   # True
EqualCondition(key="name", value="Tom", negate=True).check({"name": "Tom"})  # False
KeyEqualCondition(value="name").check("name")                    # True
SortedComparisonCondition(key="x", value="4", equal=True).check({"x": 3})    # True
```

- A key of `value` or `.` compares the value itself; any other key is a
  sub-selector such as `name.first`, `items.[0]` or `name.[#]` (length).
  When the sub-selector finds nothing, the check is false.
- `SortedComparisonCondition` compares the two strings in sorted order:
  `after=False` matches when the found value sorts before `value`,
  `after=True` when it sorts after, and `equal=True` also matches equal
  strings.
- Checking `None` raises `UnhandledCheckTypeError`.

### Versions and updates

```python
from dasel.selfupdate import version_from_string

current = version_from_string("v1.20.0")
latest = version_from_string("v1.24.0")
current.compare(latest)        # -1
current.is_development()       # False
str(latest)                    # "v1.24.0"
```

`Updater(installed_version, owner, repo)` fetches the latest release,
downloads the asset named `dasel_<os>_<arch>` (with `.exe` on Windows, and
`dasel_macos_<arch>` also accepted on `darwin`) into the working directory,
asks it for its `--version`, and moves it over the running executable. Each
step can be replaced through the updater's `*_fn` fields.

`dasel.update.run_update(updater, out, update_development, system, arch)`
runs a full update and writes progress to `out`. It raises
`IgnoredDevError`, `HaveLatestVersionError` or `NewerVersionError` when
there is nothing to do.

### Other pieces

- `dasel.cli.change_default_command(argv, command, subcommands, blacklisted_args)`
  inserts `command` after the program name when the first argument is not
  one of `subcommands`, unless any argument is blacklisted.
- `dasel.oflag.StringList` collects a flag value each time it is given.
- `dasel.version.current_version()` returns the running version.

### Errors

Every error raised here derives from `dasel.errors.DaselError`, for example
`ValueNotFoundError`, `InvalidIndexError`, `UnsupportedSelectorError` and
`UnsupportedTypeForSelectorError`.

## What this package does not do

There are no `select`, `put`, `delete` or `validate` commands, and no
reading or writing of JSON, YAML, TOML, XML or CSV documents. Selectors are
only resolved inside conditions, and only property, index (`[n]`) and
length (`[#]`) steps are understood there.