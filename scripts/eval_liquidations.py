import json
import os
from pathlib import Path

import requests


BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")
DATASET_ROOT = Path(__file__).parent / "datasets" / "liquidations_v1"
TOLERANCE = float(os.getenv("EVAL_TOLERANCE", "0.05"))


CRITICAL_FIELDS = {"scenario1_total", "scenario2_total", "scenario3_total"}


def fetch_result(record: dict) -> dict | None:
    res = requests.post(f"{BACKEND_URL}/api/v1/liquidations/calculate", json=record, timeout=20)
    if res.status_code != 200:
        return None
    return res.json()


def compare_case(expected: dict, response: dict) -> dict:
    result = response.get("result") or {}
    expected_fields = expected.get("expected_fields", {})

    total_fields = len(expected_fields)
    matched_fields = 0
    critical_total = 0
    critical_matched = 0
    mismatches = []

    for key, exp_value in expected_fields.items():
        actual_value = result.get(key)
        if key in CRITICAL_FIELDS:
            critical_total += 1
        if actual_value is None:
            mismatches.append({"field": key, "expected": exp_value, "actual": None})
            continue
        if isinstance(exp_value, bool) or not isinstance(exp_value, (int, float)):
            ok = actual_value == exp_value
        else:
            ok = abs(float(actual_value) - float(exp_value)) <= TOLERANCE
        if ok:
            matched_fields += 1
            if key in CRITICAL_FIELDS:
                critical_matched += 1
        else:
            mismatches.append({"field": key, "expected": exp_value, "actual": actual_value})

    if "valid_period" in expected and response.get("valid_period") != expected["valid_period"]:
        mismatches.append(
            {"field": "valid_period", "expected": expected["valid_period"], "actual": response.get("valid_period")}
        )

    return {
        "total_fields": total_fields,
        "matched_fields": matched_fields,
        "critical_total": critical_total,
        "critical_matched": critical_matched,
        "mismatches": mismatches,
    }


def main():
    if not DATASET_ROOT.exists():
        raise SystemExit(f"No existe dataset en {DATASET_ROOT}")

    case_results = []
    for case_dir in sorted(DATASET_ROOT.glob("case_*")):
        record_file = case_dir / "record.json"
        expected_file = case_dir / "expected.json"
        if not record_file.exists() or not expected_file.exists():
            case_results.append({"case": case_dir.name, "error": "missing_files"})
            continue
        record = json.loads(record_file.read_text(encoding="utf-8"))
        expected = json.loads(expected_file.read_text(encoding="utf-8"))
        response = fetch_result(record)
        if response is None:
            case_results.append({"case": case_dir.name, "error": "calculation_unavailable"})
            continue
        stats = compare_case(expected, response)
        stats["case"] = case_dir.name
        case_results.append(stats)

    valid_results = [r for r in case_results if "error" not in r]
    if not valid_results:
        print(json.dumps({"results": case_results, "summary": {"error": "no_valid_cases"}}, indent=2, ensure_ascii=False))
        return

    total_fields = sum(r["total_fields"] for r in valid_results)
    matched_fields = sum(r["matched_fields"] for r in valid_results)
    critical_total = sum(r["critical_total"] for r in valid_results)
    critical_matched = sum(r["critical_matched"] for r in valid_results)
    mismatches = sum(len(r["mismatches"]) for r in valid_results)

    accuracy = (matched_fields / total_fields * 100.0) if total_fields else 0.0
    critical_accuracy = (critical_matched / critical_total * 100.0) if critical_total else 0.0

    summary = {
        "accuracy_pct": round(accuracy, 2),
        "critical_accuracy_pct": round(critical_accuracy, 2),
        "mismatches": mismatches,
        "gates": {
            "critical_accuracy_eq_100": critical_accuracy == 100.0,
            "mismatches_eq_0": mismatches == 0,
        },
    }

    print(json.dumps({"results": case_results, "summary": summary}, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
