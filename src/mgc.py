#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Mini-Go command-line compiler
Usage: mgc <source> [output] [--ast]

Examples:
    mgc fatorial.mg
    mgc fatorial.mg fatorial.tac --ast
"""

import os
import sys
from pathlib import Path

from compiler import Compiler
from diagnostics import CompileError


def print_usage():
    print(__doc__)
    print("Arguments:")
    print("  source   - Mini-Go source file")
    print("  output   - file to write the TAC listing to (optional)")
    print("  --ast    - also print the syntax tree")


def main(argv=None):
    args = list(sys.argv[1:] if argv is None else argv)

    show_ast = '--ast' in args
    args = [a for a in args if a != '--ast']

    if len(args) < 1 or len(args) > 2:
        print_usage()
        return 1

    source_path = Path(args[0])
    target_path = Path(args[1]) if len(args) > 1 else None

    if not source_path.exists():
        print(f"✗ error: source file does not exist: {source_path}")
        return 1

    if not source_path.is_file():
        print(f"✗ error: source path is not a file: {source_path}")
        return 1

    config = {
        "show_ast": show_ast,
        "show_warnings": True,
    }

    print(f"[MGC] compiling {source_path.absolute()}")

    try:
        compiler = Compiler(config)
        result = compiler.compile_source(source_path)
        print(compiler.report(result))

        if target_path is not None:
            target_path.write_text(result.listing() + "\n", encoding='utf-8')
            print(f"\n  TAC written to: {target_path.absolute()}")

        print("\n✓ compilation succeeded")

    except CompileError as e:
        print(f"\n✗ compilation failed ({e.stage}):")
        for line in e.report():
            print(f"  {line}")
        return 1

    except Exception as e:
        print("\n✗ compilation failed!")
        print(f"  error: {e}")

        # show the stack trace in debug mode
        if os.environ.get("MGC_DEBUG"):
            import traceback
            traceback.print_exc()

        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
