from __future__ import annotations

import dataclasses
import json
import logging
import os
import time
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from containment._policies import make_policy
from containment._util import _ensure_dir, _jsonable, _now_iso

logger = logging.getLogger(__name__)


@dataclasses.dataclass
class CaseResult:
    case_id: str
    policy: str
    status: str  # "pass" | "fail" | "error"
    details: dict[str, Any]
    duration_s: float = 0.0

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.case_id,
            "policy": self.policy,
            "status": self.status,
            "details": self.details,
            "duration_s": round(self.duration_s, 3),
        }


def run_case(case: Mapping[str, Any], *, default_id: str = "case") -> CaseResult:
    """Evaluate one case dict: ``{"policy", "expected", "actual", "negate"?, "id"?}``."""
    if not isinstance(case, Mapping):
        return CaseResult(
            default_id, "?", "error",
            {"error": f"case must be a JSON object, got {type(case).__name__}: {case!r}"},
        )
    case_id = str(case.get("id", default_id))
    policy_name = str(case.get("policy", "?"))
    t0 = time.monotonic()
    try:
        policy = make_policy(case["policy"], case["expected"])
        matcher = policy.negate() if case.get("negate", False) else policy
        outcome = matcher.apply(case["actual"])
    except (KeyError, TypeError, ValueError) as e:
        # DuplicateExpectedElement is a ValueError: the case never got to compare.
        return CaseResult(
            case_id, policy_name, "error",
            {"error": f"{type(e).__name__}: {e}"},
            duration_s=time.monotonic() - t0,
        )
    return CaseResult(
        case_id,
        policy.kind.value,
        "pass" if outcome.matched else "fail",
        {
            "negate": bool(case.get("negate", False)),
            "expected": _jsonable(case["expected"]),
            "actual": _jsonable(case["actual"]),
            "message": outcome.message,
        },
        duration_s=time.monotonic() - t0,
    )


def check_cases(
    cases: Iterable[Mapping[str, Any]],
    *,
    name: str = "cases",
    out_dir: str = ".containment",
    on_result: Callable[[CaseResult], None] | None = None,
) -> tuple[list[CaseResult], dict[str, Any]]:
    _ensure_dir(out_dir)

    results: list[CaseResult] = []
    for i, case in enumerate(cases):
        result = run_case(case, default_id=f"case-{i}")
        logger.debug("case %s (%s): %s", result.case_id, result.policy, result.status)
        results.append(result)
        if on_result is not None:
            on_result(result)

    summary: dict[str, Any] = {
        "name": name,
        "timestamp": _now_iso(),
        "total": len(results),
        "passed": sum(1 for r in results if r.status == "pass"),
        "failed": sum(1 for r in results if r.status == "fail"),
        "errors": sum(1 for r in results if r.status == "error"),
    }

    results_path = os.path.join(out_dir, f"{name}.results.json")
    summary_path = os.path.join(out_dir, f"{name}.summary.json")

    with open(results_path, "w", encoding="utf-8") as f:
        json.dump([r.to_json() for r in results], f, indent=2)

    with open(summary_path, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)

    return results, summary
