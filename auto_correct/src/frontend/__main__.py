from __future__ import annotations
import argparse, json, sys
from autocorrect import config as CFG
from autocorrect.engine import Engine
from autocorrect.models import EngineConfig

def build_config(args: argparse.Namespace) -> EngineConfig:
    return EngineConfig(
        alphabet=CFG.EXTENDED_ALPHABET if args.extended else CFG.ALPHABET,
        gram=args.gram,
        short_len=args.short_len,
        sort_groups=args.sort,
    )

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Autocorrect CLI (Engine-backed)")
    p.add_argument("dictionary", help="Dictionary file, or a name under the dictionaries folder")
    p.add_argument("--root", default=None, help="Folder holding <name>.txt dictionaries")
    p.add_argument("--gram", type=int, default=CFG.GRAM, help="n-gram length")
    p.add_argument("--short-len", type=int, default=CFG.SHORT_LEN, help="Short-word length")
    p.add_argument("--extended", action="store_true", help="Also accept hyphens")
    p.add_argument("--sort", action="store_true", help="Alphabetize same-distance groups")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine(build_config(args))
    try:
        eng.build_from_file(args.dictionary, root=args.root, verbose=args.verbose)

        def run_query(q: str):
            result = eng.suggest(q)
            if args.json:
                print(json.dumps({"query": q,
                                  "exact": result.is_exact_match,
                                  "suggestions": list(result.suggestions)}, indent=2))
            elif result.is_exact_match:
                print(f"'{q}' is a dictionary word.")
            elif not result.suggestions:
                print("(no suggestions)")
            else:
                print("Did you mean:")
                for i, w in enumerate(result.suggestions, 1):
                    print(f"{i:<3} {w}")

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

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    sys.exit(main())
