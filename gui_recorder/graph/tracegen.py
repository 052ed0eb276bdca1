# file: gui_recorder/graph/tracegen.py
import pathlib

DWELL_MS = 12000


def render_tracegen_script(url: str, preset: str, trace_path: str, dwell_ms: int = DWELL_MS) -> str:
    """Build a standalone sync_playwright script that records a short trace.

    The script opens a headed Chromium with the device preset, loads the URL,
    lingers for `dwell_ms` so the user can look around, and writes the trace
    zip. Any failure is printed to stderr and exits with status 1.
    """
    return f'''"""
Generated trace capture. Requires: pip install playwright && playwright install chromium
"""

import sys
from playwright.sync_api import sync_playwright

PRESET = {preset!r}
URL = {url!r}
TRACE_PATH = {trace_path!r}


def main():
    with sync_playwright() as p:
        device = dict(p.devices.get(PRESET, {{}}))
        device.pop("default_browser_type", None)
        browser = p.chromium.launch(headless=False)
        context = browser.new_context(**device)
        context.tracing.start(screenshots=True, snapshots=True, sources=True)
        page = context.new_page()
        page.goto(URL, wait_until="domcontentloaded")
        page.wait_for_timeout({dwell_ms})
        context.tracing.stop(path=TRACE_PATH)
        browser.close()


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print(e, file=sys.stderr)
        sys.exit(1)
'''


def write_tracegen_script(path: pathlib.Path, url: str, preset: str, trace_path: str) -> pathlib.Path:
    path = pathlib.Path(path)
    path.write_text(render_tracegen_script(url, preset, trace_path), encoding="utf-8")
    return path
