#!/usr/bin/env python3
"""
FileStore Service.
Serves the validated file system operations over HTTP.
"""
import sys
import argparse

from filestore.adapters.fastapi_adapter import app
from filestore.application.logging_setup import configure_logging
from filestore.domain.services.configuration_service import ConfigurationService


def server_mode(host: str, port: int, log_level: int):
    """Launch the FastAPI server."""
    import uvicorn

    print(f"Starting server on {host}:{port}")
    print(f"API Documentation: http://{host}:{port}/docs")

    uvicorn.run(app, host=host, port=port, log_level=log_level)


def main():
    """Main entry point."""
    configuration = ConfigurationService()

    parser = argparse.ArgumentParser(description="FileStore Service")
    parser.add_argument("--host", default=configuration.get_host(), help="Server IP address")
    parser.add_argument("--port", type=int, default=configuration.get_port(), help="Server port")
    args = parser.parse_args()

    configure_logging(configuration)
    server_mode(args.host, args.port, configuration.get_log_level())
    return 0


if __name__ == "__main__":
    sys.exit(main())
