"""Equation Engine transition-graph utilities.

Converts a canvas into a NetworkX directed chain for inspection:
one node per item, one edge between each consecutive pair.
"""

from typing import Any, Dict, Sequence

import networkx as nx

from .elements import Element, is_element, is_operation, text_of


def _role(item: Element) -> str:
    if is_element(item):
        return "element"
    if is_operation(item):
        return "operation"
    return "unknown"


def sequence_to_nx(items: Sequence[Element]) -> nx.DiGraph:
    """Return a DiGraph with nodes n0..nK in sequence order."""
    g = nx.DiGraph()

    for idx, item in enumerate(items):
        g.add_node(
            f"n{idx}",
            kind=item.kind,
            text=text_of(item),
            role=_role(item),
            element_id=item.id,
        )
        if idx > 0:
            g.add_edge(f"n{idx-1}", f"n{idx}")

    return g


def graph_summary(g: nx.DiGraph) -> Dict[str, Any]:
    roles = [data["role"] for _, data in g.nodes(data=True)]
    pattern = " ".join({"element": "E", "operation": "O"}.get(r, "?") for r in roles)
    return {
        "num_nodes": g.number_of_nodes(),
        "num_edges": g.number_of_edges(),
        "pattern": pattern,
        "is_chain": nx.is_directed_acyclic_graph(g)
        and all(g.out_degree(n) <= 1 and g.in_degree(n) <= 1 for n in g.nodes),
    }
