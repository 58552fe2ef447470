#!/usr/bin/env python3
"""Trade Scout pre-flight environment validation.

Checks:
  1. Python version compatibility (3.10+)
  2. Required package imports
  3. Trade Scout module imports
  4. Credentials for the configured LLM backend
  5. Export directory writability
  6. Optional geolocation endpoint reachability

Usage:
    python scripts/validate_env.py
    python scripts/validate_env.py --skip-network
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path
from typing import List, Optional, Tuple

# Ensure project root is on sys.path
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

# ── ANSI colours ────────────────────────────────────────────────────────────────
_GREEN = "\033[32m"
_RED = "\033[31m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"
_BOLD = "\033[1m"

CheckResult = Tuple[Optional[bool], str]


def _ok(msg: str) -> str:
    return f"{_GREEN}✓{_RESET}  {msg}"


def _fail(msg: str) -> str:
    return f"{_RED}✗{_RESET}  {msg}"


def _warn(msg: str) -> str:
    return f"{_YELLOW}⚠{_RESET}  {msg}"


def _header(msg: str) -> str:
    return f"\n{_BOLD}{msg}{_RESET}"


# ── Check functions ──────────────────────────────────────────────────────────────

def check_python_version() -> CheckResult:
    """Verify Python version is 3.10 or newer."""
    major, minor = sys.version_info[:2]
    version_str = f"{major}.{minor}.{sys.version_info.micro}"
    if (major, minor) < (3, 10):
        return False, f"Python {version_str} detected, requires >= 3.10"
    return True, f"Python {version_str}"


def check_package_imports() -> List[CheckResult]:
    """Verify required packages import; LLM backend SDKs are optional."""
    packages = [
        ("google.genai", "google-genai", True),
        ("docx", "python-docx", True),
        ("reportlab", "reportlab", True),
        ("requests", "requests", True),
        ("yaml", "PyYAML", True),
        ("dotenv", "python-dotenv", True),
        ("anthropic", "anthropic", False),
        ("ollama", "ollama", False),
        ("pytest", "pytest", False),
    ]
    results: List[CheckResult] = []
    for import_name, package_name, required in packages:
        try:
            mod = importlib.import_module(import_name)
            version = getattr(mod, "__version__", "?")
            results.append((True, f"{package_name} ({version})"))
        except ImportError:
            if required:
                results.append((False, f"{package_name} NOT installed (pip install {package_name})"))
            else:
                results.append((None, f"{package_name} not installed (optional)"))
    return results


def check_tradescout_imports() -> List[CheckResult]:
    """Verify the tradescout package modules can be imported."""
    modules = [
        "config.settings",
        "tradescout.session",
        "tradescout.analysis.response_parser",
        "tradescout.analysis.aggregator",
        "tradescout.clients.llm_client",
        "tradescout.io.report_docx",
        "tradescout.io.report_pdf",
    ]
    results: List[CheckResult] = []
    for module in modules:
        try:
            importlib.import_module(module)
            results.append((True, module))
        except ImportError as exc:
            results.append((False, f"{module}: {exc}"))
    return results


def check_credentials() -> List[CheckResult]:
    """Report the configured backend and whether its credential is present."""
    from config.settings import ScoutConfig

    cfg = ScoutConfig()
    results: List[CheckResult] = [(True, f"LLM_BACKEND = {cfg.llm_backend!r}")]
    if cfg.llm_backend == "gemini":
        results.append((True, f"Models: search={cfg.search_model}, analysis={cfg.analysis_model}, venue={cfg.venue_model}"))
    if cfg.has_credentials:
        results.append((True, "API credential present for the active backend"))
    else:
        results.append((False, "No API credential for the active backend (set API_KEY)"))
    return results


def check_export_dir() -> CheckResult:
    """Verify the export directory is writable."""
    from config.settings import ScoutConfig

    export_path = _ROOT / ScoutConfig().export_dir
    try:
        export_path.mkdir(parents=True, exist_ok=True)
        test_file = export_path / ".write_test"
        test_file.write_text("ok")
        test_file.unlink()
        return True, f"Export directory writable: {export_path}"
    except OSError as exc:
        return False, f"Export directory not writable ({export_path}): {exc}"


def check_geolocation() -> CheckResult:
    """Resolve approximate coordinates through the configured endpoint."""
    from config.settings import ScoutConfig
    from tradescout.clients.geolocation_client import GeolocationClient

    cfg = ScoutConfig()
    coords = GeolocationClient(url=cfg.geolocation_url, timeout=cfg.geolocation_timeout).locate()
    if coords is None:
        return None, f"Geolocation unavailable at {cfg.geolocation_url} (venue lookups run unbiased)"
    return True, f"Geolocation OK: {coords[0]:.2f}, {coords[1]:.2f}"


# ── Report ───────────────────────────────────────────────────────────────────────

def _print_results(results: List[CheckResult], indent: int = 2) -> int:
    """Print check results and return count of failures."""
    failures = 0
    pad = " " * indent
    for ok, msg in results:
        if ok is True:
            print(f"{pad}{_ok(msg)}")
        elif ok is False:
            print(f"{pad}{_fail(msg)}")
            failures += 1
        else:
            print(f"{pad}{_warn(msg)}")
    return failures


def main() -> None:
    """Run all pre-flight checks and report results."""
    parser = argparse.ArgumentParser(description="Trade Scout pre-flight environment validation")
    parser.add_argument(
        "--skip-network",
        action="store_true",
        default=False,
        help="Skip the geolocation endpoint check",
    )
    args = parser.parse_args()

    from tradescout.utils.logging_utils import configure_logging

    configure_logging(log_level="ERROR")

    print(f"\n{_BOLD}Trade Scout: Environment Validation{_RESET}")

    print(_header("1. Python Version"))
    total_failures = _print_results([check_python_version()])

    print(_header("2. Package Imports"))
    total_failures += _print_results(check_package_imports())

    print(_header("3. Trade Scout Module Imports"))
    module_failures = _print_results(check_tradescout_imports())
    total_failures += module_failures

    if module_failures == 0:
        print(_header("4. Credentials"))
        total_failures += _print_results(check_credentials())

        print(_header("5. Export Directory"))
        total_failures += _print_results([check_export_dir()])

        print(_header("6. Geolocation"))
        if args.skip_network:
            print(f"  {_warn('Skipped (--skip-network)')}")
        else:
            _print_results([check_geolocation()])

    print(f"\n{'═' * 54}")
    if total_failures == 0:
        print(f"{_GREEN}{_BOLD}All required checks passed.{_RESET} Environment is ready.")
        sys.exit(0)
    print(f"{_RED}{_BOLD}{total_failures} check(s) failed.{_RESET} Resolve the errors above first.")
    sys.exit(1)


if __name__ == "__main__":
    main()
