"""
Command line entry point

    brandstorm-domains --stdio
    brandstorm-domains --http [--host HOST] [--port PORT]
"""
import argparse
import sys
from typing import List, Optional


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="brandstorm-domains",
        description="Domain name suggestion and availability server"
    )
    transport = parser.add_mutually_exclusive_group(required=True)
    transport.add_argument("--stdio", action="store_true", help="Serve MCP over stdio")
    transport.add_argument("--http", action="store_true", help="Serve the HTTP API")
    parser.add_argument("--host", default=None, help="HTTP host (default from HOST)")
    parser.add_argument("--port", type=int, default=None, help="HTTP port (default from PORT)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.stdio:
        from brandstorm_domains.mcp_server import main as run_stdio
        run_stdio()
    else:
        from brandstorm_domains.main import run as run_http
        run_http(host=args.host, port=args.port)

    return 0


if __name__ == "__main__":
    sys.exit(main())
