# bendkit

Building blocks for the front end of a Bend-style compiler: the syntax tree
of the imperative (Python-like) surface language, two passes that prepare
that tree for lowering, an intermediate interaction-net representation with
conversion from net trees, the compiler options, and an `argparse` parser
for the compiler's command line.

## Installation

```
pip install bendkit
```

To run the test suite:

```
pip install "bendkit[test]"
pytest
```

## Modules

| Module                | Contents |
|-----------------------|----------|
| `bendkit.options`     | `CompileOpts`, `RunOpts`, `OptLevel`, `AdtEncoding` |
| `bendkit.imp_ast`     | `Op`, `InPlaceOp`, `CtrField`; expressions (`Eraser`, `Var`, `Chn`, `Num`, `Call`, `Lam`, `Bin`, `Str`, `Lst`, `Tup`, `Sup`, `Constructor`, `Comprehension`, `MapInit`, `MapGet`); assignment patterns (`PatEraser`, `PatVar`, `PatChn`, `PatTup`, `PatSup`, `PatMapSet`); statements (`Assign`, `InPlace`, `If`, `Match`, `Switch`, `Bend`, `Fold`, `Do`, `Ask`, `Return`, `Open`, `Use`, `ErrStmt`) with `MatchArm`; top-level `Definition`, `Enum` and `Variant` |
| `bendkit.map_get`     | `gen_map_get`, `substitute_map_gets` |
| `bendkit.kwargs`      | `order_kwargs`, `order_call_kwargs`, `KwargsError` |
| `bendkit.net`         | `INet`, `Node`, `INode`, `Port`, `NodeKind`, `NodeTag`, `CtrKind`, `CtrVariant`, `ROOT` |
| `bendkit.hvmc_to_net` | `HvmcNet`, the tree types (`TreeEra`, `TreeCtr`, `TreeVar`, `TreeRef`, `TreeNum`, `TreeOp`, `TreeMat`), `hvmc_to_inodes`, `inodes_to_inet`, `hvmc_to_net` |
| `bendkit.cli`         | `OptArg`, `WarningArg`, `compile_opts_from_cli`, `build_parser` |

## Compiler options

`CompileOpts()` gives the defaults: eta reduction, match linearization
(`OptLevel.ENABLED`) and combinator floating are on; pruning, merging,
inlining and the net-size check are off; ADTs use `AdtEncoding.NUM_SCOTT`.
The dataclass is frozen, so the helpers return new objects.

```python
from bendkit.options import CompileOpts, OptLevel

opts = CompileOpts()
fast = opts.set_all()      # every optimisation on; check_net_size and adt_encoding kept
plain = opts.set_no_all()  # every optimisation off; check_net_size and adt_encoding kept

assert fast.linearize_matches is OptLevel.ENABLED
assert not plain.linearize_matches.enabled()
plain.check_for_strict()   # prints two warnings to stdout
```

`OptLevel.enabled()` is true for everything but `DISABLED`;
`OptLevel.is_extra()` is true only for `ENABLED`. `str(AdtEncoding.SCOTT)`
is `"Scott"` and `str(AdtEncoding.NUM_SCOTT)` is `"NumScott"`. `RunOpts`
holds the `linear_readback` and `pretty` flags.

## Desugaring passes

Both passes change a `Definition` from `bendkit.imp_ast` in place.

- `gen_map_get(definition)` replaces every `MapGet` (`m[k]`) inside a
  statement's expressions with a fresh variable `map/get%N`, numbered from 0
  in the order the pass meets them, and puts in front of that statement one
  assignment `(map/get%N, m) = Map/get(m, k)` per lookup.
  `substitute_map_gets(expr, counter)` does the expression part alone and
  returns the new expression with a dict of the substitutions made.
- `order_kwargs(definition, lookup)` turns named arguments of calls and
  constructors into positional ones, in the order of the callee's
  parameters. `lookup` is a mapping from names to parameter names, or a
  callable returning them or `None`. Named arguments to a variable that
  `lookup` does not know or to an expression, an unknown constructor, a
  wrong argument count, a missing name or an unexpected name raise
  `KwargsError`, whose message starts with the enclosing function's name.
  `order_call_kwargs(names, args, kwargs)` does the check and reordering for
  one call and returns the full argument list.

## Interaction nets

`INet()` starts with a deadlocked root node at address 0, whose slot 1 is
`ROOT`. `new_node(kind)` adds a node whose ports point to themselves,
`link(a, b)` connects two ports both ways, `set(src, dst)` points one port
at another, and `enter_port(port)` gives the port on the other side.

`hvmc_to_inodes(net)` flattens an `HvmcNet` (a root tree and a list of
redex pairs) into `INode`s whose ports are named wires: `"_"` is the net's
root, redex trees hang from `a0`, `a1`, ... and fresh wires are `x0`,
`x1`, .... `inodes_to_inet` links ports that share a name, and
`hvmc_to_net` does both steps.

## Command-line options

`build_parser()` returns an `argparse.ArgumentParser` with the subcommands
`check`, `run`, `run-c`, `run-cu`, `gen-hvm`, `gen-c`, `gen-cu` and
`desugar`, the global `-v/--verbose` and `-e/--entrypoint` flags, and per
subcommand `-O` (space-separated `OptArg` values, collected into
`comp_opts`) and `-W`/`-D`/`-A` (collected into `warn_opts` as
`("warning" | "error" | "allow", WarningArg)` pairs, in the order given).
The run and gen subcommands also set `hvm_command` and `supports_io`.

`compile_opts_from_cli(args)` applies `OptArg` values to the defaults in
order, so a later value overrides an earlier one.

```python
from bendkit.cli import build_parser, compile_opts_from_cli

ns = build_parser().parse_args(["check", "-O", "no-all eta", "prog.bend"])
opts = compile_opts_from_cli(ns.comp_opts)
assert opts.eta and not opts.float_combinators
```

## What this package does not do

There is no parser for source text or for textual nets, no lowering of the
syntax tree to lambda terms or nets, no readback of nets into terms, and
nothing that compiles or runs a program. `build_parser` only parses a
command line; the package installs no command.