from __future__ import annotations
import argparse, json, logging, random, sys

from . import config as CFG
from .engine import Engine
from .errors import AcronameError, SearchTimeoutNotice

EXIT_OK, EXIT_TIMEOUT, EXIT_ERROR = 0, 1, 2

def _print_table(rows):
    if not rows:
        print("(no result)"); return
    print(f"{'Prefix':<10} {'Suffix':<40} Original")
    for r in rows:
        print(f"{r.prefix:<10} {r.suffix:<40} {r.original}")

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="acroname", description="Acronym / initialism generator")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--acronym", action="store_true", help="Search the dictionary for an acronym")
    g.add_argument("--initialism", action="store_true", help="First letter of every word")

    p.add_argument("--q", default=None, help="Text to run once")
    p.add_argument("--repl", action="store_true", help="Interactive loop (empty line to exit)")
    p.add_argument("-n", "--length", type=int, default=CFG.ACRONYM_LENGTH, help="Acronym length")
    p.add_argument("--timeout", type=float, default=CFG.TIMEOUT, help="Seconds to search")
    p.add_argument("--dictionary", default=None, help="Hunspell .dic or word list (default: auto)")
    p.add_argument("--keep-articles", action="store_true", help="Do not drop a/an/the")
    p.add_argument("--keep-punct", action="store_true", help="Keep non-alphanumeric characters")
    p.add_argument("--bow", action="store_true", help="Bag of words: sample a subset of words")
    p.add_argument("--bow-prop", type=float, default=CFG.BOW_PROPORTION, help="Bag-of-words proportion")
    p.add_argument("--seed", type=int, default=None, help="Random seed (reproducible acronyms)")
    p.add_argument("--table", action="store_true", help="Print prefix/suffix/original columns")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")
    return p

def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    if not args.q and not args.repl:
        p.error("nothing to do: pass --q TEXT and/or --repl")

    if args.verbose or CFG.VERBOSE:
        logging.basicConfig(level=logging.INFO)

    eng = Engine(args.dictionary)
    rng = random.Random(args.seed)
    structured = args.table or args.json

    def run_query(q: str) -> int:
        opts = dict(ignore_articles=not args.keep_articles, alnum_only=not args.keep_punct,
                    bag_of_words=args.bow, bow_proportion=args.bow_prop, as_table=structured)
        try:
            if args.acronym:
                res = eng.acronym(q, acronym_length=args.length, timeout=args.timeout, rng=rng, **opts)
            else:
                res = eng.initialism(q, rng=rng, **opts)
        except (AcronameError, ValueError) as ex:
            print(f"error: {ex}", file=sys.stderr)
            return EXIT_ERROR

        if isinstance(res, SearchTimeoutNotice):
            if args.json:
                print(json.dumps({"timeout": res.timeout, "message": res.message}))
            else:
                print(res.message)
            return EXIT_TIMEOUT
        if args.json:
            print(json.dumps(res.as_dict(), ensure_ascii=False, indent=2))
        elif args.table:
            _print_table([res])
        else:
            print(res)
        return EXIT_OK

    status = EXIT_OK
    if args.q:
        status = run_query(args.q)

    if args.repl:
        print("Type a phrase (empty line to exit).")
        while True:
            try:
                q = input("> ").strip()
            except (EOFError, KeyboardInterrupt):
                print(); break
            if not q:
                break
            status = run_query(q)

    return status

if __name__ == "__main__":
    raise SystemExit(main())
