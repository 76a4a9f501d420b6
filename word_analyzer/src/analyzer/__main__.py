from __future__ import annotations
import argparse, json, logging
from . import config as CFG
from .engine import Engine
from .errors import StorageError

log = logging.getLogger("analyzer")

def _shutdown(eng: Engine) -> int:
    try:
        eng.shutdown()
    except StorageError as exc:
        log.error("Shutdown failed: %s", exc)
        return 1
    return 0

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Word analyzer CLI (Engine-backed)")
    p.add_argument("--words", default=str(CFG.WORDS_FILE), help="Backing word file")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop after load")
    p.add_argument("--json", action="store_true", help="Emit JSON results")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    eng = Engine(args.words, verbose=args.verbose)
    try:
        eng.start()
    except StorageError as exc:
        log.error("Startup failed: %s", exc)
        return 1

    def run_query(q: str):
        res = eng.analyze(q)
        if args.json:
            print(json.dumps(res.to_dict(), ensure_ascii=False))
        else:
            print(f"value:   {res.value if res.value is not None else '(none)'}")
            print(f"lexical: {res.lexical or '(none)'}")

    try:
        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print("Type a word (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)
    finally:
        code = _shutdown(eng)
    return code

if __name__ == "__main__":
    raise SystemExit(main())
