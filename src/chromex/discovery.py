"""System browser discovery.

Used to fill ``Options.executable_path`` when a caller prefers the installed
Chrome over Playwright's bundled Chromium.
"""
import logging
import os
import platform
import shutil

log = logging.getLogger(__name__)

ENV_CHROME_PATH = "CHROMEX_CHROME_PATH"

_DARWIN_CANDIDATES = [
    "/Applications/Google Chrome.app/Contents/MacOS/Google Chrome",
    "/Applications/Chromium.app/Contents/MacOS/Chromium",
    "/Applications/Microsoft Edge.app/Contents/MacOS/Microsoft Edge",
]

_LINUX_CANDIDATES = [
    "google-chrome",
    "google-chrome-stable",
    "chromium",
    "chromium-browser",
    "microsoft-edge",
]

_WINDOWS_CANDIDATES = [
    r"C:\Program Files\Google\Chrome\Application\chrome.exe",
    r"C:\Program Files (x86)\Google\Chrome\Application\chrome.exe",
    r"C:\Program Files (x86)\Microsoft\Edge\Application\msedge.exe",
]


def find_system_chrome() -> str | None:
    """Find a Chrome, Chromium or Edge executable.

    ``$CHROMEX_CHROME_PATH`` wins when it names an existing file. Otherwise
    the platform's usual install locations are probed in order. Returns
    ``None`` when nothing is found.
    """
    override = os.environ.get(ENV_CHROME_PATH, "").strip()
    if override:
        if os.path.isfile(override):
            return override
        log.warning("%s=%s is not a file; ignoring", ENV_CHROME_PATH, override)

    system = platform.system()
    if system == "Linux":
        for name in _LINUX_CANDIDATES:
            path = shutil.which(name)
            if path:
                return path
        return None

    if system == "Darwin":
        candidates = _DARWIN_CANDIDATES
    elif system == "Windows":
        candidates = _WINDOWS_CANDIDATES
    else:
        return None
    for candidate in candidates:
        if os.path.isfile(candidate):
            return candidate
    return None
