"""
Command line runner.

    python -m tapevm run program.bf [--step-limit N] [--non-ascii POLICY] [--config cfg.yaml] [--trace]
    python -m tapevm hello
"""

import argparse
import sys

from .config import NON_ASCII_POLICIES, EngineConfig, load_config
from .debugger import Tracer
from .engine import Engine
from .errors import TapeVMError
from .frontend import parse
from .programs import hello_world


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tapevm", description="Run byte-cell tape programs")
    sub = ap.add_subparsers(dest="command", required=True)

    run_p = sub.add_parser("run", help="Run a program from a source file")
    run_p.add_argument("file", help="Path to program source")

    hello_p = sub.add_parser("hello", help="Run the built-in Hello World program")

    for p in (run_p, hello_p):
        p.add_argument("--config", default=None, help="Path to YAML engine config")
        p.add_argument("--step-limit", type=int, default=None, help="Abort after this many steps")
        p.add_argument("--non-ascii", choices=NON_ASCII_POLICIES, default=None,
                       help="Output policy for cell values 128-255")
        p.add_argument("--trace", action="store_true", help="Print machine state after every step")
        p.add_argument("--trace-limit", type=int, default=200, help="Maximum number of traced steps")
    return ap


def resolve_config(args) -> EngineConfig:
    """File config, then environment, then command line flags."""
    cfg = load_config(args.config) if args.config else EngineConfig()
    cfg = EngineConfig.from_env(cfg)
    if args.step_limit is not None:
        cfg = EngineConfig(max_steps=args.step_limit, non_ascii=cfg.non_ascii)
    if args.non_ascii is not None:
        cfg = EngineConfig(max_steps=cfg.max_steps, non_ascii=args.non_ascii)
    return cfg


def main(argv=None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    try:
        cfg = resolve_config(args)
    except (OSError, ValueError) as e:
        print(f"❌ Bad configuration: {e}", file=sys.stderr)
        return 2

    if args.command == "run":
        try:
            # commands are ASCII; any other byte is a comment
            with open(args.file, "r", encoding="latin-1") as f:
                program = parse(f.read())
        except OSError as e:
            print(f"❌ Cannot read program: {e}", file=sys.stderr)
            return 2
        except SyntaxError as e:
            print(f"❌ Syntax error: {e}", file=sys.stderr)
            return 2
    else:
        program = hello_world()

    hooks = [Tracer(limit=args.trace_limit, stream=sys.stderr, non_ascii=cfg.non_ascii)] if args.trace else []
    engine = Engine(cfg, sink=sys.stdout, hooks=hooks)
    try:
        engine.run(program)
    except TapeVMError as e:
        print(f"\n❌ Halted after {e.steps} steps: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
