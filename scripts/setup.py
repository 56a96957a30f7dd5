#!/usr/bin/env python3
"""
Environment bootstrap for the VIB34D visual test.
Installs this project in editable mode, fetches Chromium and confirms it
starts headless before the first real run.
"""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def run_command(args, description, cwd=PROJECT_ROOT):
    print(f"\n📦 {description}...")
    result = subprocess.run(args, cwd=str(cwd), capture_output=True, text=True)
    if result.returncode != 0:
        print(f"❌ {description} failed (exit {result.returncode})")
        if result.stderr:
            print(result.stderr.strip())
        return False
    print(f"✅ {description} completed")
    return True


def install_steps(with_tests):
    target = ".[test]" if with_tests else "."
    return [
        ([sys.executable, "-m", "pip", "install", "-e", target], f"Installing vib34d-visual-test ({target})"),
        ([sys.executable, "-m", "playwright", "install", "chromium"], "Fetching Chromium for Playwright"),
    ]


def check_chromium():
    """Launch headless Chromium once and open a blank page."""
    print("\n🔍 Checking headless Chromium...")
    try:
        from playwright.sync_api import sync_playwright

        with sync_playwright() as p:
            browser = p.chromium.launch(headless=True)
            version = browser.version
            browser.new_page().goto("about:blank")
            browser.close()
    except Exception as exc:
        print(f"❌ Chromium did not start: {exc}")
        return False
    print(f"✅ Chromium {version} launches headless")
    return True


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    print("🚀 Bootstrapping VIB34D visual test...")

    for args, description in install_steps(with_tests="--with-tests" in argv):
        if not run_command(args, description):
            sys.exit(1)

    if not check_chromium():
        sys.exit(1)

    print("\n✅ Ready. Place index.html next to visual_test.py and run:")
    print("   vib34d-visual-test")
    print("   vib34d-visual-test --headless --no-hold --report-json report.json")


if __name__ == "__main__":
    main()
