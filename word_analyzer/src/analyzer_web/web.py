from __future__ import annotations
import argparse
import logging
import signal
from flask import Flask, current_app, request, jsonify
from werkzeug.exceptions import BadRequest
from analyzer import config as CFG
from analyzer.engine import Engine
from analyzer.errors import StorageError

log = logging.getLogger(__name__)

_EXT = "word_analyzer"

def create_app(engine: Engine) -> Flask:
    """Flask app serving POST /analyze on top of a started Engine."""
    app = Flask(__name__)
    app.extensions[_EXT] = engine

    # ---------- API ----------
    @app.post("/analyze")
    def api_analyze():
        # parse regardless of Content-Type; malformed JSON raises BadRequest
        body = request.get_json(force=True)
        if not isinstance(body, dict):
            raise BadRequest("request body must be a JSON object")
        text = body.get("text")
        if not isinstance(text, str):
            raise BadRequest("field 'text' is required and must be a string")
        res = current_app.extensions[_EXT].analyze(text)
        return jsonify(res.to_dict())

    @app.errorhandler(BadRequest)
    def bad_request(exc: BadRequest):
        return jsonify(error=exc.description), 400

    return app

class _Stop(Exception):
    """SIGTERM received while serving."""

def _raise_exit(signum, frame):
    raise _Stop(signum)

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the word analyzer HTTP service")
    ap.add_argument("--words", default=str(CFG.WORDS_FILE), help="Backing word file")
    ap.add_argument("--host", default=CFG.HOST)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    engine = Engine(args.words)
    try:
        engine.start()
    except StorageError as exc:
        log.error("Startup failed, not listening: %s", exc)
        return 1

    # SIGTERM unwinds out of app.run so the word list is saved below
    signal.signal(signal.SIGTERM, _raise_exit)
    app = create_app(engine)
    code = 0
    try:
        log.info("Server started and listening on port %d", CFG.PORT)
        app.run(host=args.host, port=CFG.PORT, debug=args.verbose, use_reloader=False)
    except _Stop:
        log.info("Received SIGTERM, stopping")
    finally:
        try:
            engine.shutdown()
        except StorageError as exc:
            log.error("Shutdown failed, words not saved: %s", exc)
            code = 1
    return code

if __name__ == "__main__":
    raise SystemExit(main())
