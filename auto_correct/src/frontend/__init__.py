"""Public API for the autocorrect engine (module-level, single dictionary)."""
from __future__ import annotations
import time
from autocorrect.engine import Engine
from autocorrect.models import EngineConfig, SuggestionResult

_engine: Engine | None = None

def initialize(dictionary: str,
               root: str | None = None,
               config: EngineConfig | None = None,
               verbose: bool = False) -> Engine:
    """
    Load `dictionary` (a file path, or a bare name under the dictionary root)
    and build the shared engine used by suggest().
    """
    global _engine
    t0 = time.perf_counter()
    eng = Engine(config)
    if verbose:
        print(f"[build] loading dictionary: {dictionary}")
    eng.build_from_file(dictionary, root=root, verbose=verbose)
    _engine = eng
    if verbose:
        print(f"[ready] init complete in {time.perf_counter() - t0:.2f}s")
    return eng

def suggest(query: str) -> SuggestionResult:
    """Return ExactMatch or the ordered Suggestions for `query`."""
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine.suggest(query)
