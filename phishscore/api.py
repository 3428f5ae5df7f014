"""Flask API for PhishScore.

Run: python -m phishscore.api
"""

import os
import logging
from flask import Flask, request, jsonify, abort
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import redis as redis_lib

from phishscore.app.heuristics import analyze_url
from phishscore.app.report import chart_series, verdict_display
from phishscore.app.rules import DEFAULT_REGISTRY

API_VERSION = "1.0"
MAX_BATCH_URLS = 100

# Logging
logging.basicConfig(level=os.getenv("PHISHSCORE_LOG_LEVEL", "INFO").upper())
logger = logging.getLogger("api")

# Flask app
app = Flask(__name__)

RATE_LIMIT = os.getenv("PHISHSCORE_RATE_LIMIT", "60 per minute")

# Rate limiter: prefer Redis storage in production when REDIS_URL is set
REDIS_URL = os.getenv("REDIS_URL")
if REDIS_URL:
    try:
        redis_client = redis_lib.from_url(REDIS_URL)
        redis_client.ping()
        limiter = Limiter(key_func=get_remote_address, app=app,
                          default_limits=[RATE_LIMIT], storage_uri=REDIS_URL)
        logger.info("Using Redis at %s for rate limiting", REDIS_URL)
    except (redis_lib.RedisError, ValueError):
        logger.exception("Failed to connect to Redis, falling back to in-memory limiter")
        limiter = Limiter(key_func=get_remote_address, app=app, default_limits=[RATE_LIMIT])
else:
    limiter = Limiter(key_func=get_remote_address, app=app, default_limits=[RATE_LIMIT])

# API key
API_KEY = os.getenv("PHISHSCORE_API_KEY", None)
if API_KEY:
    logger.info("API key enabled")


def require_api_key() -> None:
    if not API_KEY:
        return
    key = request.headers.get("X-API-Key") or request.args.get("api_key")
    if not key or key != API_KEY:
        abort(401, description="Invalid or missing API key")


def result_payload(url: str) -> dict:
    result = analyze_url(url)
    payload = result.to_dict()
    payload["chart"] = chart_series(result)
    payload["display"] = verdict_display(result)
    return payload


@app.errorhandler(401)
def unauthorized(err):
    return jsonify({"error": "unauthorized", "detail": err.description}), 401


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok", "version": API_VERSION})


@app.route("/rules", methods=["GET"])
def rules():
    require_api_key()
    return jsonify({
        "rules": [
            {"id": r.rule_id, "name": r.name, "weight": r.weight, "description": r.description}
            for r in DEFAULT_REGISTRY
        ],
        "max_score": DEFAULT_REGISTRY.total_weight,
    })


@app.route("/analyze", methods=["POST"])
@limiter.limit("30 per minute")
def analyze():
    require_api_key()
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not isinstance(data.get("url"), str):
        return jsonify({"error": "missing 'url' in JSON body"}), 400

    url = data["url"].strip()
    if not url:
        return jsonify({"error": "empty url"}), 400

    try:
        payload = result_payload(url)
    except Exception:
        logger.exception("Analysis failed for %s", url)
        return jsonify({"error": "analysis_failed"}), 500

    return jsonify(payload), 200


@app.route("/analyze/batch", methods=["POST"])
@limiter.limit("10 per minute")
def analyze_batch():
    require_api_key()
    data = request.get_json(silent=True)
    urls = data.get("urls") if isinstance(data, dict) else None
    if not isinstance(urls, list) or not urls:
        return jsonify({"error": "missing 'urls' list in JSON body"}), 400
    if len(urls) > MAX_BATCH_URLS:
        return jsonify({"error": f"at most {MAX_BATCH_URLS} urls per request"}), 400
    if not all(isinstance(u, str) for u in urls):
        return jsonify({"error": "every url must be a string"}), 400

    try:
        results = [result_payload(u.strip()) for u in urls]
    except Exception:
        logger.exception("Batch analysis failed")
        return jsonify({"error": "analysis_failed"}), 500

    return jsonify({"count": len(results), "results": results}), 200


if __name__ == "__main__":
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", 5050)), debug=False)
