# app.py

import logging

from flask import Flask, Response, request, jsonify

import config
from export import EXPORT_FORMATS, export
from models import InvalidInput
from scoring import AGGREGATE_WEIGHTS, analyze

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = Flask(__name__)


def _analyze_request():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")
    transcript = data.get("transcript")
    if transcript is None:
        raise InvalidInput("Field 'transcript' is required")
    return analyze(transcript)


@app.errorhandler(InvalidInput)
def handle_invalid_input(error):
    logger.warning("Rejected analysis request: %s", error)
    return jsonify({"error": str(error)}), 400


@app.route("/api/analyze", methods=["POST"])
def api_analyze():
    result = _analyze_request()
    return jsonify(result.to_dict())


@app.route("/api/export", methods=["POST"])
def api_export():
    fmt = request.args.get("format", "json").lower()
    if fmt not in EXPORT_FORMATS:
        return jsonify({"error": f"Invalid format. Supported: {', '.join(EXPORT_FORMATS)}"}), 400

    result = _analyze_request()
    body, mimetype = export(result, fmt)
    return Response(
        body,
        mimetype=mimetype,
        headers={"Content-Disposition": f'attachment; filename="transcript-analysis.{fmt}"'},
    )


@app.route("/api/criteria", methods=["GET"])
def api_criteria():
    criteria = [
        {"name": name, "weight": weight, "description": description}
        for name, weight, description in config.DEFAULT_SCORING_CRITERIA
    ]
    return jsonify({"criteria": criteria, "aggregateWeights": AGGREGATE_WEIGHTS})


if __name__ == "__main__":
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
