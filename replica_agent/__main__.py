"""Entry point: python -m replica_agent"""

import argparse
import os

import uvicorn

from .app import CONFIG_FILE_ENV
from .config import load_settings


def main():
    parser = argparse.ArgumentParser(prog="replica-agent")
    parser.add_argument("--config", help="JSON config file overriding AGENT_* environment")
    args = parser.parse_args()

    if args.config:
        # read again by create_app, including in reload workers
        os.environ[CONFIG_FILE_ENV] = os.path.abspath(args.config)
    settings = load_settings(args.config)

    uvicorn.run(
        "replica_agent.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
