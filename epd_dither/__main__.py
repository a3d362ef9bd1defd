"""Run the dithering service with ``python -m epd_dither``."""

from __future__ import annotations

from .app import app
from .config import SETTINGS


def main() -> None:
    app.run(host="0.0.0.0", port=SETTINGS.port, debug=False)


if __name__ == "__main__":
    main()
