"""Project dependency graph backed by networkx.DiGraph."""

from __future__ import annotations

import networkx as nx

from slninventory.config import PackageRecord, ProjectRecord, SolutionResult


class ProjectGraph:
    """Wrapper around networkx.DiGraph with typed node/edge methods.

    Project nodes are keyed ``project:<path>``, package nodes
    ``package:<name>``. Edges point from a project to what it depends on.
    """

    def __init__(self) -> None:
        self.graph = nx.DiGraph()
        self._dangling: list[tuple[str, str]] = []

    # --- Node addition ---

    def add_project(self, record: ProjectRecord) -> None:
        self.graph.add_node(
            f"project:{record.path}",
            node_type="project",
            path=record.path,
            sdk=record.sdk,
            target_framework=record.target_framework,
            output_type=record.output_type,
            in_solution=True,
        )

    def add_project_reference(self, from_project: str, to_project: str) -> None:
        target = f"project:{to_project}"
        if not self.graph.has_node(target):
            # Referenced but not parsed: outside the solution or missing on disk
            self.graph.add_node(target, node_type="project", path=to_project, in_solution=False)
            self._dangling.append((from_project, to_project))
        elif not self.graph.nodes[target].get("in_solution"):
            self._dangling.append((from_project, to_project))
        self.graph.add_edge(
            f"project:{from_project}",
            target,
            edge_type="PROJECT_REFERENCE",
        )

    def add_package_reference(self, project: str, package: PackageRecord) -> None:
        # Nameless references stay on the ProjectRecord but have no graph node
        if package.name is None:
            return
        pkg_id = f"package:{package.name}"
        if not self.graph.has_node(pkg_id):
            self.graph.add_node(pkg_id, node_type="package", name=package.name)
        self.graph.add_edge(
            f"project:{project}",
            pkg_id,
            edge_type="PACKAGE_REFERENCE",
            version=package.version,
        )

    # --- Queries ---

    def _project_subgraph(self) -> nx.DiGraph:
        nodes = [n for n, d in self.graph.nodes(data=True) if d.get("node_type") == "project"]
        return self.graph.subgraph(nodes)

    def get_projects(self) -> list[dict]:
        return [
            data for _, data in self.graph.nodes(data=True)
            if data.get("node_type") == "project" and data.get("in_solution")
        ]

    def get_project_references(self) -> list[dict]:
        return [
            {"from": src.removeprefix("project:"), "to": tgt.removeprefix("project:")}
            for src, tgt, data in self.graph.edges(data=True)
            if data.get("edge_type") == "PROJECT_REFERENCE"
        ]

    def get_package_references(self) -> list[dict]:
        return [
            {
                "project": src.removeprefix("project:"),
                "package": self.graph.nodes[tgt].get("name"),
                "version": data.get("version"),
            }
            for src, tgt, data in self.graph.edges(data=True)
            if data.get("edge_type") == "PACKAGE_REFERENCE"
        ]

    def dependencies(self, path: str) -> list[str]:
        """Projects ``path`` references directly."""
        node = f"project:{path}"
        if not self.graph.has_node(node):
            return []
        return [
            tgt.removeprefix("project:")
            for _, tgt, data in self.graph.out_edges(node, data=True)
            if data.get("edge_type") == "PROJECT_REFERENCE"
        ]

    def dependents(self, path: str) -> list[str]:
        """Projects that reference ``path`` directly."""
        node = f"project:{path}"
        if not self.graph.has_node(node):
            return []
        return [
            src.removeprefix("project:")
            for src, _, data in self.graph.in_edges(node, data=True)
            if data.get("edge_type") == "PROJECT_REFERENCE"
        ]

    def dangling_references(self) -> list[dict]:
        """References to projects that are not part of the inventoried solution."""
        return [{"from": src, "to": tgt} for src, tgt in self._dangling]

    def find_cycles(self) -> list[list[str]]:
        return [
            [n.removeprefix("project:") for n in cycle]
            for cycle in nx.simple_cycles(self._project_subgraph())
        ]

    def build_order(self) -> list[str]:
        """Solution projects ordered so every project follows its dependencies.

        Raises:
            networkx.NetworkXUnfeasible: the references contain a cycle.
        """
        order = reversed(list(nx.topological_sort(self._project_subgraph())))
        return [
            self.graph.nodes[n]["path"]
            for n in order
            if self.graph.nodes[n].get("in_solution")
        ]

    def project_count(self) -> int:
        return len(self.get_projects())

    def package_count(self) -> int:
        return sum(1 for _, d in self.graph.nodes(data=True) if d.get("node_type") == "package")

    def project_reference_count(self) -> int:
        return len(self.get_project_references())


def build_project_graph(result: SolutionResult) -> ProjectGraph:
    """Build the dependency graph for every project in ``result``."""
    pg = ProjectGraph()

    # Nodes first so forward references are not mistaken for dangling ones
    for record in result.projects:
        pg.add_project(record)

    for record in result.projects:
        for ref in record.project_references:
            pg.add_project_reference(record.path, ref)
        for pkg in record.packages:
            pg.add_package_reference(record.path, pkg)

    return pg
