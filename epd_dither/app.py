from __future__ import annotations

import logging
from dataclasses import asdict

from flask import Flask, jsonify, request

from .config import SETTINGS, configure_logging
from .errors import ConfigurationError
from .infrastructure.cache import CACHE
from .infrastructure.network import FETCHER, decode_image
from .infrastructure.responses import encode_png, send_png
from .processing.palette import DEVICE_COLORS, PALETTES
from .processing.pipeline import dither_image, options_from_settings

APP_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    configure_logging()
    app = Flask(__name__)

    @app.errorhandler(ConfigurationError)
    def configuration_error(exc: ConfigurationError):
        return jsonify(error=str(exc)), 400

    @app.route("/dither", methods=["POST"])
    def dither_upload():
        options = options_from_settings(SETTINGS, request.args)
        src = decode_image(request.get_data())
        return send_png(encode_png(dither_image(src, options)))

    @app.route("/dither", methods=["GET"])
    def dither_source():
        options = options_from_settings(SETTINGS, request.args)
        # The source is fixed by configuration; clients only pick dithering options.
        key = f"{SETTINGS.source_url}|{options!r}"
        cached = CACHE.get(key)
        if cached:
            return send_png(cached)
        try:
            src = FETCHER.fetch_source()
        except RuntimeError as exc:
            logger.error("Source unavailable: %s", exc)
            fallback = CACHE.last_good()
            if fallback:
                return send_png(fallback)
            return jsonify(error=f"Source Error: {exc}"), 502
        data = encode_png(dither_image(src, options))
        CACHE.put(key, data)
        return send_png(data)

    @app.route("/palettes")
    def palettes():
        return jsonify(palettes=PALETTES, device_colors=DEVICE_COLORS)

    @app.route("/health")
    def health():
        return jsonify(
            ok=True,
            version=APP_VERSION,
            palette=SETTINGS.palette,
            dither_mode=SETTINGS.dither_mode,
            kernel=SETTINGS.kernel,
        )

    @app.route("/settings")
    def settings_view():
        return jsonify(asdict(SETTINGS))

    return app


app = create_app()
