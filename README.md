# specargs

Building blocks for command line parsing where the accepted syntax is written
as a compact, POSIX-style usage spec string such as

    [-R [-H | -L | -P]] SRC... DST

The spec is tokenized, parsed into a finite state machine and then used to
match a list of command line arguments, with full backtracking, so layouts
like `SRC... DST` work: the last argument goes to `DST`, the others to `SRC`.

## Installing

    pip install specargs

For running the tests:

    pip install "specargs[test]"
    pytest

## Spec syntax

    spec         -> sequence
    sequence     -> choice*
    req_sequence -> choice+
    choice       -> atom ('|' atom)*
    atom         -> (ARG | shortOpt | longOpt | optSeq | '[OPTIONS]' | group | optional | '--') '...'?
    shortOpt     -> '-' letter
    longOpt      -> '--' name        (letters, digits, '_', and '-' after the first character)
    optSeq       -> '-' letter letter+
    group        -> '(' req_sequence ')'
    optional     -> '[' req_sequence ']'

- Arguments are upper-case words (`SRC`, `ARG_2`); `OPTIONS` is a keyword
  meaning "any of the declared options, any number of times".
- `-abc` is a choice between `-a`, `-b` and `-c`, repeatable.
- An option may be followed by a purely descriptive value, as in
  `--timeout=<seconds>`; it is ignored by the parser.
- `--` in a spec means that everything after it on the command line is an
  argument; options may not appear in the spec after it.

On the command line, options are accepted as `-f`, `-f=v`, `-f v`, `-fv`,
`--force`, `--force=v` and `--force v`, and boolean one-letter options can be
folded (`-xvf`). A `--` on the command line ends option parsing.

## Modules

- `specargs.values`: value holders `BoolValue`, `StringValue`, `IntValue`,
  `Float64Value`, `StringsValue`, `IntsValue`, `Floats64Value`, all derived
  from `FlagValue` (a `set(s)` method raising `ValueError` on bad text), plus
  `is_bool`, `is_multi_valued`, `set_from_env` and `default_value`. Any object
  with a `set` method can be used as a value; `is_bool_flag()`, `clear()` and
  `is_default()` are picked up when present.
- `specargs.container`: `Container`, the record of one option or argument
  (names, description, env variables, value, whether it was set from the
  environment or by the user).
- `specargs.options`: option descriptions `BoolOpt`, `StringOpt`, `IntOpt`,
  `Float64Opt`, `StringsOpt`, `IntsOpt`, `Floats64Opt`, `VarOpt`;
  `make_option_container` builds a container (reading the env variables listed
  in `env_var`), `mk_opt_strs` turns `"f force"` into `["-f", "--force"]`, and
  `register_option` indexes a container by its names, raising `ValueError` on
  a duplicate. Also the `HelpRequested` and `VersionRequested` exceptions.
- `specargs.lexer`: `tokenize(usage)` returns `Token`s and raises `ParseError`
  (with `input`, `msg` and `pos`) on bad input.
- `specargs.parser`: `parse(tokens, Params(...))` builds and prepares the state
  machine, raising `ParseError` for syntax errors and undeclared options or
  arguments.
- `specargs.matcher`: the matchers behind the machine's transitions and the
  `ParseContext` they fill.
- `specargs.fsm`: `State.parse(args)` matches a command line and fills the
  matched containers' values; it raises `UsageError` when no path accepts the
  arguments and `ValueError` when a value cannot be parsed.
- `specargs.flow`: `Step` chains with success and error paths; raising
  `ExitCode(n)` in a step runs the remaining error steps and then the step's
  `exiter` with `n`.
- `specargs.fsmdot`, `specargs.flowdot`: `dot(...)` renders a state machine or
  a step chain as a Graphviz dot document.
- `specargs.model`: plain dataclasses `App`, `Command`, `Option`, `Argument`
  describing an application.
- `specargs.fsmtest`, `specargs.matchertest`: helpers for testing the parse
  machinery (`new_fsm`, `fsm_str`, `transition_strs`, `NopeMatcher`,
  `YepMatcher`, `FuncMatcher`; `new_arg`, `new_opt`, `new_options`).

## Example

```python
from specargs.container import Container
from specargs.lexer import tokenize
from specargs.options import BoolOpt, make_option_container, register_option
from specargs.parser import Params, parse
from specargs.values import StringsValue, StringValue

options, index = [], {}
force = make_option_container(BoolOpt(name="f force", desc="overwrite"))
register_option(options, index, force)

src = Container(name="SRC", names=["SRC"], value=StringsValue())
dst = Container(name="DST", names=["DST"], value=StringValue())

spec = "[-f] SRC... DST"
state = parse(
    tokenize(spec),
    Params(
        spec=spec,
        options=options,
        options_idx=index,
        args=[src, dst],
        args_idx={"SRC": src, "DST": dst},
    ),
)
state.parse(["-f", "a.txt", "b.txt", "backup/"])
print(force.value.value, src.value.value, dst.value.value)
# True ['a.txt', 'b.txt'] backup/
```

## What it does not do

The package provides the parsing machinery only. It has no application or
command object that runs actions, dispatches sub-commands, calls before/after
hooks for you or prints help and version text; `specargs.model` only describes
such an application, and `HelpRequested` / `VersionRequested` are exceptions
for a caller to raise. Spec strings are not generated from declarations: you
write them and build the `Params` yourself. There is no command line program.