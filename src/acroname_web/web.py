from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from acroname.engine import Engine
from acroname.errors import AcronameError, MissingDictionaryResourceError, SearchTimeoutNotice
from acroname import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)
# created at import; the dictionary itself loads on first use behind the engine lock
_engine = Engine()


def _flag(name: str) -> bool:
    return request.args.get(name, "", type=str).lower() in ("1", "true", "yes", "on")

def _common_opts() -> dict:
    return dict(
        ignore_articles=not _flag("keep_articles"),
        alnum_only=not _flag("keep_punct"),
        bag_of_words=_flag("bow"),
        bow_proportion=request.args.get("bow_prop", CFG.BOW_PROPORTION, type=float),
        as_table=True,
    )

@app.errorhandler(AcronameError)
@app.errorhandler(ValueError)
def _bad_input(ex):
    return jsonify({"error": str(ex)}), 400

@app.errorhandler(MissingDictionaryResourceError)
def _no_dictionary(ex):
    log.error("Dictionary unavailable: %s", ex)
    return jsonify({"error": str(ex)}), 500

# ---------- API ----------
@app.get("/api/acronym")
def api_acronym():
    q = request.args.get("q", "", type=str)
    n = request.args.get("n", CFG.ACRONYM_LENGTH, type=int)
    timeout = request.args.get("timeout", CFG.TIMEOUT, type=float)
    res = _engine.acronym(q, acronym_length=n, timeout=timeout, **_common_opts())
    if isinstance(res, SearchTimeoutNotice):
        return jsonify({"result": None, "timeout": res.timeout, "message": res.message})
    return jsonify({"result": res.as_dict()})

@app.get("/api/initialism")
def api_initialism():
    q = request.args.get("q", "", type=str)
    res = _engine.initialism(q, **_common_opts())
    return jsonify({"result": res.as_dict()})

@app.get("/health")
def health():
    return jsonify({"ok": True, "dictionary_loaded": _engine.loaded})

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: one form, results rendered by fetch(); no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>Acroname</title>
<style>
body{margin:0;background:#0b0f14;color:#cfd8e3;font:16px/1.45 system-ui,sans-serif}
.card{max-width:720px;margin:32px auto;padding:18px;background:#0f141b;border:1px solid #1c2530;border-radius:16px}
input,select,button{padding:10px 12px;border-radius:10px;border:1px solid #1c2530;background:#0b1117;color:#cfd8e3}
#out{margin-top:16px;font-size:20px}
.muted{color:#8a94a6}
</style>
</head>
<body>
  <div class="card">
    <h1>Acroname</h1>
    <form id="f">
      <input id="q" placeholder="Type a phrase…" size="40" autofocus />
      <select id="mode"><option>acronym</option><option>initialism</option></select>
      <input id="n" type="number" min="1" max="12" value="3" style="width:64px" />
      <button>Go</button>
    </form>
    <div id="out" class="muted">Ready.</div>
  </div>
<script>
const $ = (s) => document.querySelector(s);
$("#f").addEventListener("submit", async (ev) => {
  ev.preventDefault();
  const mode = $("#mode").value;
  const url = `/api/${mode}?q=${encodeURIComponent($("#q").value)}&n=${$("#n").value}&timeout=10`;
  $("#out").textContent = "…";
  const data = await (await fetch(url)).json();
  $("#out").textContent = data.error || (data.result ? data.result.formatted : data.message);
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of the acroname Engine")
    ap.add_argument("--dictionary", default=None, help="Hunspell .dic or word list (default: auto)")
    ap.add_argument("--preload", action="store_true", help="Load the dictionary before serving")
    ap.add_argument("--host", default=CFG.HOST)
    ap.add_argument("--port", type=int, default=CFG.PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine(args.dictionary, verbose=args.verbose or CFG.VERBOSE)
    if args.preload:
        _engine.load()

    log.info("Serving on http://%s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
