# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""AuthProbe CLI."""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from ..config import HttpSettings, load_http_settings
from ..errors import ConfigurationError
from ..http import create_default_http_client
from ..log import setup_logging
from ..models import AuthMethod, build_auth_config
from ..runtime import AuthHarness

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="AuthProbe authentication test harness")
    parser.add_argument("url", help="Target URL to test")
    parser.add_argument("--json", action="store_true", help="Output JSON instead of human-friendly summary")
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument("--timeout", type=float, default=None, help="Per-probe timeout in seconds")
    parser.add_argument("--workers", type=int, default=None, help="Run up to N probes in parallel")
    parser.add_argument("--log-level", default=None, help="Logging level (default: AUTHPROBE_LOG_LEVEL or WARNING)")

    adhoc = parser.add_argument_group("single probe", "Run one probe with the given credentials instead of the suite")
    adhoc.add_argument("--method", choices=[m.value for m in AuthMethod], default=None)
    adhoc.add_argument("--username")
    adhoc.add_argument("--password")
    adhoc.add_argument("--token", help="Authorization header value, including any 'Bearer ' prefix")
    adhoc.add_argument("--headers", dest="headers_json", help='Extra headers as a JSON object, e.g. {"X-API-Key": "k"}')
    adhoc.add_argument("--cookies", dest="cookies_json", help='Cookies as a JSON object, e.g. {"session": "abc"}')
    return parser


def _print_json(data: Any) -> None:
    payload = data.to_dict() if hasattr(data, "to_dict") else data
    json.dump(payload, sys.stdout, indent=2, sort_keys=True)
    sys.stdout.write("\n")


def _pretty_print_suite(report: dict[str, Any]) -> None:
    summary = report.get("summary") or {}
    print(f"[AuthProbe] Target: {report.get('target_url') or '-'}")
    print(
        f"Passed {summary.get('passed', 0)}/{summary.get('total', 0)} "
        f"({float(summary.get('success_rate') or 0.0):.1f}%)"
    )
    if report.get("cancelled"):
        print("Run was cancelled; undispatched cases are reported as failures.")
    for item in report.get("results") or []:
        case = item.get("test_case") or {}
        result = item.get("result") or {}
        validation = item.get("validation") or {}
        verdict = "PASS" if validation.get("passed") else "FAIL"
        status = result.get("status_code")
        elapsed = result.get("response_time_ms")
        print(f"- {verdict} {case.get('id')}: {case.get('name')} (status {status}, {elapsed}ms)")
        if result.get("error_message"):
            print(f"    error: {result['error_message']}")
        for outcome in validation.get("validation_results") or []:
            mark = "ok" if outcome.get("passed") else "xx"
            print(f"    [{mark}] {outcome.get('check')}: {outcome.get('details')}")


def _pretty_print_probe(result: dict[str, Any]) -> None:
    print(f"[AuthProbe] Success: {result.get('success')}")
    print(f"Status: {result.get('status_code')} in {result.get('response_time_ms')}ms")
    if result.get("error_message"):
        print(f"Error: {result['error_message']}")
    if result.get("redirect_url"):
        print(f"Redirected to: {result['redirect_url']}")
    cookies = result.get("cookies") or {}
    print(f"Cookies: {', '.join(cookies) if cookies else '-'}")
    tokens = result.get("auth_tokens") or {}
    if tokens:
        print(f"Auth tokens: {', '.join(sorted(tokens))}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    if args.timeout is not None and args.timeout > 0:
        settings.timeout = args.timeout
    if args.workers is not None:
        settings.max_workers = max(1, args.workers)

    try:
        auth_config = None
        if args.method is not None:
            auth_config = build_auth_config(
                args.method,
                username=args.username,
                password=args.password,
                token=args.token,
                headers_json=args.headers_json,
                cookies_json=args.cookies_json,
            )

        http_client = create_default_http_client(settings)
        with AuthHarness(http_client=http_client, settings=settings) as harness:
            if auth_config is not None:
                result = harness.probe(args.url, auth_config)
                if args.json:
                    _print_json(result)
                else:
                    _pretty_print_probe(result.to_dict())
                return EXIT_OK if result.success else EXIT_FAILED

            report = harness.run_suite(args.url)
    except ConfigurationError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if args.json:
        _print_json(report)
    else:
        _pretty_print_suite(report.to_dict())
    return EXIT_OK if report.summary.failed == 0 else EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
