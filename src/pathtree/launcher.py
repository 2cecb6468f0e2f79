"""Launch the Streamlit viewer and open it in the browser."""

from __future__ import annotations

import logging
import threading
import time
import webbrowser
from pathlib import Path

import requests

logger = logging.getLogger(__name__)

PORT = 8501
URL = f"http://localhost:{PORT}"


def wait_and_open_browser(url: str = URL, attempts: int = 30) -> bool:
    """Poll *url* until it answers 200, then open it. Returns True if opened."""
    for _ in range(attempts):
        try:
            resp = requests.get(url, timeout=2)
            if resp.status_code == 200:
                webbrowser.open(url)
                return True
        except requests.RequestException:
            logger.debug("Viewer not up yet at %s", url)
        time.sleep(1)
    logger.warning("Viewer did not answer at %s; open it manually", url)
    return False


def main() -> None:
    from streamlit.web import bootstrap

    app_path = str(Path(__file__).resolve().parent / "app.py")

    # Open browser in a background thread once the server is up
    threading.Thread(target=wait_and_open_browser, daemon=True).start()

    bootstrap.run(
        app_path,
        is_hello=False,
        args=[],
        flag_options={
            "global.developmentMode": False,
            "server.headless": True,
            "server.port": PORT,
            "browser.gatherUsageStats": False,
        },
    )


if __name__ == "__main__":
    main()
