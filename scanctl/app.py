#!/usr/bin/env python3
# =============================================================================
# Copyright (c) 2026 5echo.io
# Project: scanctl
# Purpose: Flask HTTP surface (start scan, scan status, health).
# Path: /scanctl/app.py
# Created: 2026-10-19
# Last modified: 2026-10-19
# =============================================================================

from flask import Flask, jsonify
import logging

from . import __version__
from .config import ScannerConfig, load_config
from .controller import Outcome, ScanController
from .process_store import ProcessHandleStore

OUTCOME_HTTP_CODES = {
    Outcome.OK: 200,
    Outcome.CONFLICT: 409,
    Outcome.INTERNAL_FAULT: 500,
}


def die_json(msg: str, code: int = 500):
    return jsonify({"ok": False, "message": msg}), code


def create_app(config: ScannerConfig | None = None) -> Flask:
    """Build the Flask app with its own store and controller.

    Each app owns exactly one ProcessHandleStore, so the single-scan rule is
    per process serving the app.
    """
    cfg = config or load_config()

    app = Flask(__name__)
    app.config["SCANNER"] = cfg
    controller = ScanController(ProcessHandleStore(), cfg.executable, cfg.arguments)
    app.extensions["scan_controller"] = controller

    @app.errorhandler(Exception)
    def _handle_all_errors(err):
        """Every route answers JSON, including 404/405 and probe failures."""
        code = getattr(err, "code", None)
        if not isinstance(code, int):
            code = 500
        if code >= 500:
            app.logger.exception("Request failed: %s", err)
        return die_json(str(err), code)

    @app.post("/scan")
    def api_scan():
        reply = controller.handle_scan_request()
        code = OUTCOME_HTTP_CODES[reply.outcome]
        if reply.outcome is not Outcome.OK:
            return die_json(reply.message, code)
        return jsonify({"ok": True, "message": reply.message, "pid": reply.pid}), code

    @app.get("/status")
    def api_status():
        return jsonify(controller.handle_status_request())

    @app.get("/health")
    def api_health():
        return jsonify({"ok": True, "version": __version__})

    return app


def main():
    cfg = load_config()
    # Under systemd stdout/stderr go to the journal
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )
    app = create_app(cfg)
    app.logger.info(
        "Starting web server on %s:%s (scanner: %s %s)",
        cfg.bind_host, cfg.bind_port, cfg.executable, " ".join(cfg.arguments),
    )
    app.run(host=cfg.bind_host, port=cfg.bind_port, threaded=True)


if __name__ == "__main__":
    main()
