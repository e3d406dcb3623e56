"""Logic for writing a JSON report of a parse run."""

import json
import time
from collections import Counter
from typing import Any

from external_results.error_info import ErrorInfo
from external_results.results import ExternalResults


class ResultsReport:
    """Collects the outcome of parsing one results file."""

    def __init__(self, settings_hash: str, results_file: str):
        self.settings_hash = settings_hash
        self.results_file = results_file
        self.start_time = time.time()

    def build(
        self,
        results: ExternalResults,
        errors: tuple[ErrorInfo, ...],
    ) -> dict[str, Any]:
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "settings_hash": self.settings_hash,
                "results_file": self.results_file,
                "data_source": str(results.data_source),
            },
            "results": results.to_dict(),
            "diagnostics": [
                {
                    "module": e.module_name,
                    "message": e.message,
                    "cause": repr(e.exception) if e.exception is not None else None,
                }
                for e in errors
            ],
            "stats": self._compute_stats(results, errors),
        }

    def generate_report(
        self,
        results: ExternalResults,
        errors: tuple[ErrorInfo, ...],
        path: str,
        indent: int = 2,
    ) -> None:
        report = self.build(results, errors)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=indent)

    def _compute_stats(
        self,
        results: ExternalResults,
        errors: tuple[ErrorInfo, ...],
    ) -> dict[str, Any]:
        value_type_counts: Counter[str] = Counter()
        for artifact in results.artifacts:
            for attribute in artifact.attributes:
                value_type_counts[str(attribute.value_type)] += 1
        return {
            "derived_files": len(results.derived_files),
            "artifacts": len(results.artifacts),
            "reports": len(results.reports),
            "diagnostics": len(errors),
            "value_type_counts": dict(value_type_counts),
        }
