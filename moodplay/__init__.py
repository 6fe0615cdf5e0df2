import os
import logging
from flask import Flask

if os.getenv("FLASK_DEBUG") == "1":
    from dotenv import load_dotenv
    load_dotenv()

from .config import Config
from .playlist_gpt import create_openai_client
from .youtube import create_youtube_client


base_dir = os.path.abspath(os.path.dirname(__file__))
logger = logging.getLogger(__name__)


def create_app(test_config=None, openai_client=None, youtube_client=None):
    """
    Application factory. Clients can be injected, otherwise they are built once here
    from the configured API keys. A missing key leaves its client unset and every
    playlist request answers with a configuration error.
    """
    app = Flask(__name__,
                template_folder=os.path.join(base_dir, "templates"),
                static_folder=os.path.join(base_dir, "static"))

    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    logging.basicConfig(level=app.config["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if openai_client is None and app.config.get("OPENAI_API_KEY"):
        openai_client = create_openai_client(app.config["OPENAI_API_KEY"], app.config["OPENAI_TIMEOUT"])
    if youtube_client is None and app.config.get("YOUTUBE_API_KEY"):
        youtube_client = create_youtube_client(app.config["YOUTUBE_API_KEY"])

    if openai_client is None:
        logger.error("OPENAI_API_KEY is not configured")
    if youtube_client is None:
        logger.error("YOUTUBE_API_KEY is not configured")

    app.extensions["moodplay"] = {
        "openai": openai_client,
        "youtube": youtube_client,
    }

    from .routes import routes
    app.register_blueprint(routes)

    return app
