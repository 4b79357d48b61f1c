"""
FastAPI server entry point for StudyTube.
"""

import argparse
import uvicorn

from studytube.config import get_config


def main():
    """Run the FastAPI server."""
    # Parse command line arguments
    parser = argparse.ArgumentParser(description="StudyTube API")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the server to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind the server to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    config = get_config()

    # Print startup info
    print(f"Starting {config.app_name} API server v{config.app_version}")
    print(f"Environment: {config.environment}")
    print(f"Binding to: {args.host}:{args.port}")

    # Run the server
    uvicorn.run(
        "studytube.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
