"""
Trie Lookup Service — a small REST API over the character Trie.

Exposes the five trie operations (insert, find, delete, count, enumerate)
as JSON endpoints against one process-wide trie. Keys are used verbatim.
Built with Flask.

The shared trie is not synchronized; run the service single-threaded
(the default for ``python app.py``) or put a lock around it.
"""

from __future__ import annotations

import os
import time
import logging

from flask import Flask, jsonify, request

from trie import Trie

app = Flask(__name__)
logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger("trie-service")

# Global trie instance — persists for the lifetime of the process
trie = Trie()
_start_time = time.time()

_SEED_ENTRIES = [("B", 1), ("Bar", 2)]

if os.environ.get("TRIE_SEED", "1") != "0":
    for key, value in _SEED_ENTRIES:
        trie.add_string(key, value)
    logger.info("Seeded trie with %d keys", len(_SEED_ENTRIES))


def _key_arg():
    """Return the raw ``q`` query parameter, or None when it is absent."""
    return request.args.get("q")


# ── Health & Info ─────────────────────────────────────────────────────────

@app.route("/")
def index():
    """Landing page with API documentation."""
    return jsonify({
        "service": "Trie Lookup Service",
        "version": "1.0.0",
        "endpoints": {
            "GET  /":                 "This help page",
            "GET  /health":           "Health check",
            "GET  /stats":            "Trie statistics",
            "GET  /find?q=<key>":     "Exact path lookup",
            "GET  /entries":          "All (symbol, value) pairs, pre-order",
            "POST /insert":           "Insert a key  {\"key\": \"...\", \"value\": <int>}",
            "DELETE /delete?q=<key>": "Clear a key's value",
        },
    })


@app.route("/health")
def health():
    """Liveness / readiness probe."""
    return jsonify({
        "status": "healthy",
        "uptime_seconds": round(time.time() - _start_time, 2),
        "trie_size": trie.length(),
    })


@app.route("/stats")
def stats():
    """Trie statistics."""
    return jsonify({
        "total_keys": trie.length(),
        "total_edges": len(trie.iter()),
        "uptime_seconds": round(time.time() - _start_time, 2),
    })


# ── Core API ──────────────────────────────────────────────────────────────

@app.route("/find")
def find():
    """Exact path lookup; ``value`` is null when the path holds no key."""
    q = _key_arg()
    if q is None:
        return jsonify({"error": "Missing query parameter 'q'"}), 400
    node = trie.find(q)
    if node is None:
        return jsonify({"key": q, "path_exists": False, "value": None}), 404
    return jsonify({"key": q, "path_exists": True, "value": node.value})


@app.route("/entries")
def entries():
    """Every (edge symbol, value) pair in the trie."""
    pairs = [[symbol, value] for symbol, value in trie.iter()]
    return jsonify({"count": len(pairs), "entries": pairs})


@app.route("/insert", methods=["POST"])
def insert():
    """Insert a key into the trie."""
    body = request.get_json(silent=True) or {}
    key = body.get("key")
    value = body.get("value")

    if not isinstance(key, str):
        return jsonify({"error": "Missing 'key' in request body"}), 400
    # bool is an int subclass
    if not isinstance(value, int) or isinstance(value, bool):
        return jsonify({"error": "'value' must be an integer"}), 400

    trie.add_string(key, value)
    logger.info("Inserted key=%r value=%d", key, value)
    return jsonify({"inserted": key, "value": value, "trie_size": trie.length()}), 201


@app.route("/delete", methods=["DELETE"])
def delete():
    """Clear a key's value; the path itself stays in the trie."""
    q = _key_arg()
    if q is None:
        return jsonify({"error": "Missing query parameter 'q'"}), 400

    previous = trie.delete(q)
    deleted = previous is not None
    if deleted:
        logger.info("Deleted key=%r", q)
    status = 200 if deleted else 404
    return jsonify({
        "key": q,
        "deleted": deleted,
        "value": previous,
        "trie_size": trie.length(),
    }), status


# ---------------------------------------------------------------------------
# Entrypoint
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8080))
    debug = os.environ.get("FLASK_DEBUG", "0") == "1"
    logger.info("Starting Trie Lookup Service on port %d", port)
    app.run(host="0.0.0.0", port=port, debug=debug, threaded=False)
