"""
Serve the Patient Directory API.

Usage:
    python -m patient_directory [--host HOST] [--port PORT] [--config PATH] [--profile NAME]
"""

from __future__ import annotations

import argparse
import logging

import uvicorn

from patient_directory import configure_logging
from patient_directory.api import create_app
from patient_directory.config.loader import load_config


def main() -> None:
    parser = argparse.ArgumentParser(description="Patient Directory API server")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--config", default=None, help="YAML configuration file")
    parser.add_argument("--profile", default=None, help="Profile overlaid on --config")
    args = parser.parse_args()

    config = load_config(args.config, args.profile)
    configure_logging(logging.getLevelName(config.logging.level.upper()))

    uvicorn.run(create_app(config), host=args.host, port=args.port)


if __name__ == "__main__":
    main()
