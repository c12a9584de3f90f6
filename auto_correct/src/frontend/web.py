from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from autocorrect import config as CFG
from autocorrect.engine import Engine
from frontend.__main__ import build_config

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/suggest")
def api_suggest():
    q = request.args.get("q", "", type=str)
    if not q.strip():
        return jsonify({"query": q, "exact": False, "suggestions": []})
    if _engine is None or _engine.index is None:
        return jsonify({"error": "engine not initialized"}), 503
    result = _engine.suggest(q)
    return jsonify({
        "query": q,
        "exact": result.is_exact_match,
        "suggestions": list(result.suggestions),
    })

@app.get("/health")
def health():
    ready = _engine is not None and _engine.index is not None
    words = len(_engine.index) if ready else 0
    return jsonify({"ok": ready, "words": words}), (200 if ready else 503)

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Autocorrect • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial; }
.container{ max-width:720px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; }
input:focus{ border-color:var(--accent) }
#stats{ color:var(--muted); font-size:13px; margin-top:6px; }
ol{ margin-top:16px; }
.exact{ color:var(--accent) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Autocorrect</h1>
      <input id="q" type="text" placeholder="Type a word…" autocomplete="off" autofocus />
      <div id="stats">Ready.</div>
      <ol id="out"></ol>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), stats = document.querySelector("#stats");
let t; // debounce timer
async function suggest(){
  const word = q.value.trim();
  out.innerHTML = "";
  if(!word){ stats.textContent = "Ready."; return; }
  try{
    const resp = await fetch(`/api/suggest?q=${encodeURIComponent(word)}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const data = await resp.json();
    if(data.exact){
      const ok = document.createElement("span");
      ok.className = "exact";
      ok.textContent = `“${word}” is spelled correctly.`;
      stats.replaceChildren(ok);
      return;
    }
    stats.textContent = data.suggestions.length ? `Did you mean (${data.suggestions.length}):` : "No suggestions.";
    out.replaceChildren(...data.suggestions.map(w => { const li = document.createElement("li"); li.textContent = w; return li; }));
  }catch(e){
    stats.textContent = `Error: ${e.message ?? e}`;
  }
}
q.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(suggest, 150); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("dictionary")
    ap.add_argument("--root", default=None)
    ap.add_argument("--gram", type=int, default=CFG.GRAM)
    ap.add_argument("--short-len", type=int, default=CFG.SHORT_LEN)
    ap.add_argument("--extended", action="store_true")
    ap.add_argument("--sort", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(build_config(args))
    _engine.build_from_file(args.dictionary, root=args.root, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
