from __future__ import annotations

import argparse
import json
import os
import sys
import time
from typing import Any

from containment._policies import PolicyKind
from containment._runner import CaseResult, check_cases, run_case
from containment._term import force_color, paint, status_label


def _print_result_line(r: CaseResult, *, verbose: bool = False) -> None:
    timing = "  " + paint(f"({r.duration_s:.1f}s)", "dim") if r.duration_s >= 0.05 else ""
    print(f"  {status_label(r.status)}  {r.policy:<30}  {paint(r.case_id, 'bold')}{timing}")
    if verbose:
        if "message" in r.details:
            print(f"         {r.details['message']}")
        if "error" in r.details:
            print(f"         error:  {r.details['error']}")


def _print_summary(results: list[CaseResult], total_s: float, out_dir: str | None) -> None:
    passed = sum(1 for r in results if r.status == "pass")
    failed = sum(1 for r in results if r.status in ("fail", "error"))

    parts: list[str] = []
    if passed:
        parts.append(paint(f"{passed} passed", "pass"))
    if failed:
        parts.append(paint(f"{failed} failed", "fail"))

    summary = ", ".join(parts) if parts else "no cases"
    timing = paint(f"({total_s:.1f}s total)", "dim")
    location = "  " + paint(f"JSON reports in {out_dir}/", "dim") if out_dir else ""
    print(f"\n{summary}  {timing}{location}")


def _load_json(text: str, what: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"{what} is not valid JSON: {e}") from e


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="containment", description="Check collection containment relationships.")
    p.add_argument("policy", nargs="?", choices=[k.value for k in PolicyKind], help="Policy for a single comparison")
    p.add_argument("--expected", help="Expected collection as a JSON array")
    p.add_argument("--actual", help="Actual collection as a JSON array")
    p.add_argument("--not", dest="negate", action="store_true", help="Negate the policy")
    p.add_argument("--cases", help="JSON file holding a list of cases to check in batch")
    p.add_argument("--out", default=".containment", help="Output directory for batch JSON reports")
    p.add_argument("-v", "--verbose", action="store_true", help="Show messages and timing for every case")
    p.add_argument("-q", "--quiet", action="store_true", help="Only print summary and exit code")
    p.add_argument("--json", action="store_true", help="Output results as JSON array to stdout")
    p.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    args = p.parse_args(argv)

    if args.no_color:
        force_color(False)

    json_mode = args.json

    def on_result(r: CaseResult) -> None:
        if not json_mode and not args.quiet:
            _print_result_line(r, verbose=args.verbose)

    t_start = time.monotonic()
    out_dir: str | None = None
    try:
        if args.cases:
            with open(args.cases, encoding="utf-8") as f:
                cases = _load_json(f.read(), args.cases)
            if not isinstance(cases, list):
                raise ValueError(f"{args.cases} must hold a JSON array of cases")
            name = os.path.splitext(os.path.basename(args.cases))[0]
            out_dir = args.out
            results, _summary = check_cases(cases, name=name, out_dir=out_dir, on_result=on_result)
        else:
            if args.policy is None or args.expected is None or args.actual is None:
                p.error("a policy with --expected and --actual, or --cases, is required")
            case = {
                "id": "cli",
                "policy": args.policy,
                "expected": _load_json(args.expected, "--expected"),
                "actual": _load_json(args.actual, "--actual"),
                "negate": args.negate,
            }
            result = run_case(case, default_id="cli")
            if not json_mode and not args.quiet:
                _print_result_line(result, verbose=True)
            results = [result]
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    total_s = time.monotonic() - t_start

    if not results:
        if json_mode:
            print("[]")
        else:
            print(f"warning: no cases found in '{args.cases}'", file=sys.stderr)
        return 0

    if json_mode:
        print(json.dumps([r.to_json() for r in results], indent=2, default=str))
    else:
        _print_summary(results, total_s, out_dir)

    return 1 if any(r.status in ("fail", "error") for r in results) else 0
