from __future__ import annotations

import argparse
import logging
import os
import sys

import uvicorn

from structure_analyzer.errors import AnalyzerError
from structure_analyzer.report import analyze, iso_timestamp, print_tree, report_filename, save_report


OUTPUT_DIR_ENV = "STRUCTURE_ANALYZER_OUTPUT_DIR"


def _run(args: argparse.Namespace, mode: str) -> int:
	timestamp = iso_timestamp()
	print("Analyzing project structure...\n")
	try:
		report = analyze(args.path, mode, timestamp)
	except AnalyzerError as e:
		print(f"Error: {e}", file=sys.stderr)
		return 1

	print("Project Structure:")
	print_tree(report.structure, mode)

	if not args.no_save:
		output_path = os.path.join(os.path.abspath(args.output_dir), report_filename(mode, timestamp))
		save_report(report, output_path)
	return 0


def cmd_classify(args: argparse.Namespace) -> int:
	return _run(args, "classify")


def cmd_scan(args: argparse.Namespace) -> int:
	return _run(args, "scan")


def cmd_serve(args: argparse.Namespace) -> int:
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def _add_report_args(p: argparse.ArgumentParser, default_path: str) -> None:
	p.add_argument("path", nargs="?", default=default_path, help=f"Directory to analyze (default: {default_path})")
	p.add_argument("--output-dir", default=os.getenv(OUTPUT_DIR_ENV, "analysis"), help="Directory for the JSON report")
	p.add_argument("--no-save", action="store_true", help="Print the tree without writing a report")


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="structure-analyzer")
	parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pc = sub.add_parser("classify", help="Tag known configuration files and directories")
	_add_report_args(pc, ".")
	pc.set_defaults(func=cmd_classify)

	ps = sub.add_parser("scan", help="List imports, re-exports and components of source files")
	_add_report_args(ps, "src")
	ps.set_defaults(func=cmd_scan)

	pv = sub.add_parser("serve", help="Run FastAPI server")
	pv.add_argument("--host", default="127.0.0.1")
	pv.add_argument("--port", type=int, default=8000)
	pv.add_argument("--reload", action="store_true")
	pv.set_defaults(func=cmd_serve)
	return parser


def main(argv=None) -> int:
	args = build_parser().parse_args(argv)
	logging.basicConfig(
		level=logging.DEBUG if args.verbose else logging.WARNING,
		format="%(levelname)s %(name)s: %(message)s",
	)
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
