from __future__ import annotations

from typing import Any, Dict, List

from flask import Flask, jsonify, request

from game import Cell, Dispatcher, GameEngine, ReversiError, SessionStore, load_settings

SETTINGS = load_settings()

app = Flask(__name__)

# One engine per conversation key; the dispatcher serializes calls per key.
store = SessionStore(width=SETTINGS.width)
dispatcher = Dispatcher(store, style=SETTINGS.glyphs)

_CELL_NAMES = {Cell.EMPTY: "empty", Cell.WHITE: "white", Cell.BLACK: "black"}


def state_to_json(engine: GameEngine) -> Dict[str, Any]:
    white, black = engine.score()
    legal: List[List[int]] = [[r + 1, c + 1] for (r, c) in engine.legal_moves()]
    return {
        "width": engine.width,
        "board": [[_CELL_NAMES[cell] for cell in row] for row in engine.board.rows()],
        "toMove": _CELL_NAMES[engine.to_move],
        "legalMoves": legal,
        "score": {"white": white, "black": black},
        "finished": not legal,
    }


def _session_from(body: Dict[str, Any]) -> Any:
    key = body.get("session")
    if not isinstance(key, str) or not key:
        return None
    return key


@app.get("/healthz")
def healthz() -> Any:
    return jsonify({"ok": True})


@app.post("/api/message")
def api_message() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    key = _session_from(body)
    text = body.get("text")
    if key is None:
        return jsonify({"ok": False, "error": "session required"}), 400
    if not isinstance(text, str):
        return jsonify({"ok": False, "error": "text required"}), 400
    try:
        reply = dispatcher.handle(key, text)
    except ReversiError as e:
        return jsonify({"ok": False, "error": str(e)}), 400
    return jsonify({"ok": True, "reply": reply})


@app.get("/api/state")
def api_state() -> Any:
    key = request.args.get("session", "")
    if not key:
        return jsonify({"ok": False, "error": "session required"}), 400
    with store.locked(key):
        payload = state_to_json(store.get(key))
    return jsonify({"ok": True, "state": payload})


@app.post("/api/reset")
def api_reset() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    key = _session_from(body)
    if key is None:
        return jsonify({"ok": False, "error": "session required"}), 400
    with store.locked(key):
        payload = state_to_json(store.reset(key))
    return jsonify({"ok": True, "state": payload})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    app.run(host=SETTINGS.host, port=SETTINGS.port, debug=SETTINGS.flask_debug)
