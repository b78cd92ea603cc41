"""CLI entrypoint for compdoc."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from .config import DOC_TYPES
from .logging import configure_logging
from .orchestrator import Orchestrator


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compdoc",
        description="Generate API reference pages for a Vue component library.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project root containing component.doc.json (defaults to current directory).",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="doc_type",
        help=f"Output format ({' or '.join(DOC_TYPES)}).",
    )
    parser.add_argument("--title", dest="doc_name", help="Title of the generated documentation.")
    parser.add_argument(
        "--description",
        dest="doc_description",
        help="Introductory text shown on the index page.",
    )
    parser.add_argument("--components-dir", help="Directory searched for .vue files.")
    parser.add_argument("--out-dir", help="Directory the pages are written to.")
    parser.add_argument("--node", dest="node_executable", help="Node.js executable used by the parser.")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument("--log-file", type=Path, help="Also write logs to this file.")
    return parser


def _overrides_from_args(args: argparse.Namespace) -> Dict[str, Any]:
    mapping = {
        "docType": args.doc_type,
        "docName": args.doc_name,
        "docDescription": args.doc_description,
        "componentsDir": args.components_dir,
        "outDir": args.out_dir,
        "nodeExecutable": args.node_executable,
    }
    return {key: value for key, value in mapping.items() if value is not None}


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for compdoc."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    orchestrator = Orchestrator()
    try:
        result = orchestrator.run(args.path, _overrides_from_args(args))
    except OSError as exc:
        parser.exit(1, f"compdoc failed: {exc}\n")

    if result.index_path is None:
        print("No components documented")
    else:
        print(
            f"Documented {len(result.entries)} components in {_relativize(result.out_dir)}"
            f" ({len(result.skipped)} skipped)"
        )


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
