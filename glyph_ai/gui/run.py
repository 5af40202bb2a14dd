"""Launch script for the Glyphtender AI debugging service."""

import argparse
import logging

import uvicorn

from glyph_ai.config import ENV_PREFIX, resolve_config


def main(argv=None):
    """Start the server; host and port come from flags, then ``server`` config, then defaults."""
    ap = argparse.ArgumentParser(prog="python -m glyph_ai.gui.run")
    ap.add_argument("--host", type=str, default=None)
    ap.add_argument("--port", type=int, default=None)
    ap.add_argument("--config", type=str, action="append", default=[], help="YAML/JSON config files (merged)")
    ap.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    args = ap.parse_args(argv)

    server = resolve_config(args.config, ENV_PREFIX).get("server") or {}
    host = args.host or server.get("host", "127.0.0.1")
    port = args.port or int(server.get("port", 8000))
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("=" * 70)
    print("Glyphtender AI Debugger")
    print("=" * 70)
    print(f"\nAPI docs at http://{host}:{port}/docs")
    print("Press Ctrl+C to stop the server")
    print("=" * 70 + "\n")

    uvicorn.run(
        "glyph_ai.gui.app:app",
        host=host,
        port=port,
        reload=not args.no_reload,
        log_level="info"
    )


if __name__ == "__main__":
    main()
