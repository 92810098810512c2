# -*- coding: utf-8 -*-
"""Launcher for the bundled Freedom Bridge web UI.

Usage:
    freedom-bridge [--port 4173]
    python run_web_ui.py [--port 4173]

This script:
1. Loads the frontend shipped inside the package.
2. Binds http://localhost:<port> and opens it in the default browser.
3. Serves the UI until Ctrl+C.
"""

import argparse
import socket
import sys
from typing import List, Optional

import uvicorn

from asset_bundle import AssetBundle, load_bundle
from browser_launcher import LaunchError, launch as launch_browser
from server_config import DEFAULT_PORT, Address, BindError, ServerError, ServerSettings, load_settings
from web_app import create_app


BANNER_RULE = "=" * 44


def bind_listener(address: Address) -> socket.socket:
    family = socket.AF_INET6 if address.is_ipv6 else socket.AF_INET
    try:
        return socket.create_server((address.host, address.port), family=family)
    except OSError as e:
        raise BindError(f"failed to start server on {address}: {e}") from e


def serve(app, listener: socket.socket, settings: ServerSettings) -> None:
    """Run uvicorn on an already bound socket. Blocks until the server stops."""
    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        access_log=settings.access_log,
        lifespan="off",
    )
    server = uvicorn.Server(config)
    server.run(sockets=[listener])
    # an interrupt before startup finished is a stop, not a failure
    if not server.started and not server.should_exit:
        raise ServerError(f"server on {settings.address} exited before it started serving")


def run(address: str, bundle: Optional[AssetBundle] = None, open_browser: bool = True) -> None:
    addr = Address.parse(address)
    url = addr.url

    if bundle is None:
        bundle = load_bundle()

    listener = bind_listener(addr)
    try:
        print(f"Server running at: {url}")
        print()
        print("Press Ctrl+C to stop the server.")
        print()
        print(BANNER_RULE)
        print()

        if open_browser:
            try:
                launch_browser(url)
            except LaunchError:
                print(f"Note: Could not open browser automatically. Please visit {url}")

        settings = load_settings(port=addr.port, host=addr.host)
        serve(create_app(bundle), listener, settings)
    finally:
        listener.close()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Serve the bundled Freedom Bridge UI and open it in the browser")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to run the server on")
    args = parser.parse_args(argv)

    settings = load_settings(port=args.port)

    print(BANNER_RULE)
    print("Freedom Bridge Server")
    print(BANNER_RULE)
    print()

    try:
        run(settings.address)
    except ServerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nServer stopped.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
