from .playlist import build_playlist
from flask import request, render_template, Blueprint, jsonify, current_app
import traceback
import logging


routes = Blueprint('routes', __name__)
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

COUNTRY_ALIASES = {"UK": "GB"}


class ConfigurationError(RuntimeError):
    pass


def normalize_country(country):
    if not isinstance(country, str):
        return None
    country = country.strip().upper()
    if len(country) != 2 or not country.isalpha():
        return None
    return COUNTRY_ALIASES.get(country, country)


def get_clients():
    clients = current_app.extensions.get("moodplay", {})
    if clients.get("openai") is None:
        raise ConfigurationError("OpenAI API key not configured")
    if clients.get("youtube") is None:
        raise ConfigurationError("YouTube API key not configured")
    return clients["openai"], clients["youtube"]


@routes.route("/")
def index():
    return render_template("index.html")


@routes.route("/api/generate-playlist", methods=["POST"])
def generate_playlist():
    try:
        openai_client, youtube = get_clients()
    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return jsonify({"error": str(e)}), 500

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Please provide a valid prompt"}), 400

    prompt = data.get("prompt")
    if not prompt or not isinstance(prompt, str) or not prompt.strip():
        return jsonify({"error": "Please provide a valid prompt"}), 400

    prompt = prompt.strip()
    country = normalize_country(data.get("country"))
    logger.info("Generating playlist for: '%s', country: %s", prompt, country or "global")

    try:
        result = build_playlist(openai_client, youtube, prompt, country, current_app.config)
    except Exception as e:
        logger.error(f"Exception during playlist generation: {e}\n" + traceback.format_exc())
        return jsonify({
            "error": "Failed to generate playlist. Please try again.",
            "details": str(e),
        }), 500

    if not result.success:
        return jsonify(result.to_dict()), 404

    logger.info("Generated playlist with %d songs", len(result.items))
    return jsonify(result.to_dict())
