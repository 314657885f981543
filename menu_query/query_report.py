"""Logic for generating reports on executed menu queries."""

import json
import time
from dataclasses import asdict
from pathlib import Path
from typing import Any

from menu_query.menu_query import MenuQuery


class QueryReport:
    """Collects finished queries and summarizes their results."""

    def __init__(self) -> None:
        """Start an empty report."""
        self.queries: list[MenuQuery] = []
        self.start_time = time.time()

    def add_query(self, query: MenuQuery) -> None:
        """Add a finished query to the report."""
        self.queries.append(query)

    def build(self) -> dict[str, Any]:
        """Return the report as plain data."""
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "total_queries": len(self.queries),
            },
            "results": [
                {
                    "location": q.get("location"),
                    "state": q.state,
                    "query_vars": q.query_vars,
                    "item_count": q.item_count,
                    "items": [asdict(item) for item in q.items],
                    "diagnostics": [d.as_dict() for d in q.diagnostics],
                }
                for q in self.queries
            ],
            "stats": self._compute_stats(),
        }

    def generate_report(self, path: str) -> None:
        """Write the report to a JSON file."""
        Path(path).write_text(
            json.dumps(self.build(), indent=2, default=str), encoding="utf-8"
        )

    def _compute_stats(self) -> dict[str, Any]:
        items_per_location: dict[str, int] = {}
        diagnostic_counts: dict[str, int] = {}
        current_items = 0

        for q in self.queries:
            location = str(q.get("location") or "")
            items_per_location[location] = (
                items_per_location.get(location, 0) + q.item_count
            )
            for category, count in q.diagnostics.categories().items():
                diagnostic_counts[category] = diagnostic_counts.get(category, 0) + count
            current_items += sum(1 for item in q.items if item.is_current())

        return {
            "items_per_location": items_per_location,
            "diagnostic_counts": diagnostic_counts,
            "current_items": current_items,
            "empty_queries": sum(1 for q in self.queries if not q.item_count),
        }
