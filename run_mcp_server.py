"""
dynaform MCP Server Entry Point.

Run the MCP server with either stdio or SSE transport.

Usage:
    # stdio mode (for Claude Desktop)
    python run_mcp_server.py --transport stdio

    # SSE mode (for Docker/remote)
    python run_mcp_server.py --transport sse --port 8080

    # Use environment variables
    MCP_TRANSPORT=sse MCP_PORT=8080 python run_mcp_server.py
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add src to path for local development
sys.path.insert(0, str(Path(__file__).parent / "src"))

from dynaform.config import get_config, update_config
from dynaform.mcp_server import run_mcp_server


def main():
    """Main entry point."""
    config = get_config()

    parser = argparse.ArgumentParser(
        description="dynaform MCP Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Claude Desktop (stdio)
  python run_mcp_server.py --transport stdio

  # Docker/Remote (SSE)
  python run_mcp_server.py --transport sse --port 8080

  # Custom form documents
  python run_mcp_server.py --schema forms/signup.json --ui-schema forms/signup_ui.json

Environment Variables:
  MCP_TRANSPORT              Transport type: stdio or sse (default: stdio)
  MCP_PORT                   Port for SSE transport (default: 8080)
  DYNAFORM_SCHEMA_PATH       Schema document (default: packaged example)
  DYNAFORM_UI_SCHEMA_PATH    UI order document (default: packaged example)
  DYNAFORM_NUMBER_MINIMUM    Smallest accepted number (default: 18)
        """,
    )

    parser.add_argument(
        "--transport",
        choices=["stdio", "sse"],
        default=config.mcp_transport,
        help=f"Transport type (default: {config.mcp_transport})",
    )

    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Host for SSE transport (default: 0.0.0.0)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=config.mcp_port,
        help=f"Port for SSE transport (default: {config.mcp_port})",
    )

    parser.add_argument(
        "--schema",
        default=config.schema_path,
        help="Path to the schema document",
    )

    parser.add_argument(
        "--ui-schema",
        default=config.ui_schema_path,
        help="Path to the UI order document",
    )

    args = parser.parse_args()
    update_config(schema_path=args.schema, ui_schema_path=args.ui_schema)

    # stdout carries the protocol in stdio mode
    print(f"=" * 60, file=sys.stderr)
    print(f"dynaform MCP Server", file=sys.stderr)
    print(f"=" * 60, file=sys.stderr)
    print(f"Transport: {args.transport}", file=sys.stderr)
    if args.transport == "sse":
        print(f"Host: {args.host}", file=sys.stderr)
        print(f"Port: {args.port}", file=sys.stderr)
    print(f"Schema: {args.schema}", file=sys.stderr)
    print(f"UI Schema: {args.ui_schema}", file=sys.stderr)
    print(f"=" * 60, file=sys.stderr)

    try:
        asyncio.run(
            run_mcp_server(
                transport=args.transport,
                host=args.host,
                port=args.port,
            )
        )
    except KeyboardInterrupt:
        print("\nServer stopped.", file=sys.stderr)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
