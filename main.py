from __future__ import annotations

import argparse
import logging
import os
import sys

from server.settings import get_settings


def setup_logging(level: str = "info") -> None:
	formatter = logging.Formatter(
		"%(asctime)s - %(name)s - %(levelname)s - %(message)s",
		datefmt="%Y-%m-%d %H:%M:%S",
	)
	handler = logging.StreamHandler(sys.stdout)
	handler.setFormatter(formatter)

	root_logger = logging.getLogger()
	root_logger.setLevel(level.upper())
	root_logger.addHandler(handler)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
	settings = get_settings()
	parser = argparse.ArgumentParser(description="Checkers rules engine.")
	parser.add_argument("--log-level", default=settings.log_level, help="Logging level.")
	parser.add_argument(
		"--king-rule",
		choices=["flying", "short"],
		default=settings.king_rule.value,
		help="Flying kings travel whole diagonals; short kings step one square.",
	)
	commands = parser.add_subparsers(dest="command")

	serve = commands.add_parser("serve", help="Run the HTTP API server.")
	serve.add_argument("--host", default=settings.host, help="Bind host for the API server.")
	serve.add_argument("--port", type=int, default=settings.port, help="Port for the API server.")
	serve.add_argument("--reload", action="store_true", default=settings.reload, help="Enable autoreload (development only).")

	commands.add_parser("gui", help="Play a local game in a window.")

	args = parser.parse_args(argv)
	if args.command is None:
		args.command = "gui"
	return args


def run_server(args: argparse.Namespace) -> None:
	import uvicorn

	os.environ["CHECKERS_KING_RULE"] = args.king_rule
	get_settings.cache_clear()
	uvicorn.run(
		"server.app:app",
		host=args.host,
		port=args.port,
		reload=args.reload,
		log_level=args.log_level.lower(),
	)


def run_gui(args: argparse.Namespace) -> None:
	import pygame

	from draughts.pieces import KingRule
	from ui.pygame_gui import CheckersGUI

	pygame.init()
	try:
		gui = CheckersGUI(king_rule=KingRule(args.king_rule))
		gui.run()
	finally:
		pygame.quit()


def main(argv: list[str] | None = None) -> None:
	args = parse_args(argv)
	setup_logging(args.log_level)
	if args.command == "serve":
		run_server(args)
	else:
		run_gui(args)


if __name__ == "__main__":
	main()
