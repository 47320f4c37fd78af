"""JSON serialisation of an inventory result."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import networkx as nx

from slninventory import __version__
from slninventory.config import InventoryConfig, SolutionResult
from slninventory.graph.project_graph import ProjectGraph

OUTPUT_VERSION = "1.0"


def _package_count(result: SolutionResult) -> int:
    return sum(len(p.packages) for p in result.projects)


def build_output(
    config: InventoryConfig,
    result: SolutionResult,
    pg: ProjectGraph,
    total_ms: float,
) -> dict[str, Any]:
    """Build the output document for a solution result and its graph."""
    cycles = pg.find_cycles()
    try:
        build_order = pg.build_order()
    except nx.NetworkXUnfeasible:
        build_order = None

    dangling = pg.dangling_references()

    return {
        "version": OUTPUT_VERSION,
        "metadata": {
            "root_path": config.root_path,
            "solution_path": result.solution_path,
            "analysed_at": datetime.now(timezone.utc).isoformat(),
            "slninventory_version": __version__,
            "analysis_duration_ms": round(total_ms, 1),
        },
        "stats": {
            "projects": len(result.projects),
            "packages": _package_count(result),
            "distinct_packages": pg.package_count(),
            "project_references": pg.project_reference_count(),
            "dangling_references": len(dangling),
            "cycles": len(cycles),
        },
        **result.to_dict(),
        "graph": {
            "project_references": pg.get_project_references(),
            "package_references": pg.get_package_references(),
            "dangling_references": dangling,
            "build_order": build_order,
            "cycles": cycles,
        },
    }


def write_output(data: dict[str, Any], output_path: str) -> None:
    """Write the output document to a JSON file."""
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2, default=str)
