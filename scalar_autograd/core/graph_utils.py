"""
Graph diagnostics: size, fan-in/fan-out and operation breakdown of the
computation graph reachable from a root value.
"""

import logging
import numpy as np
from collections import Counter
from typing import Dict, List

from .engine import topological_order
from .value import Value

logger = logging.getLogger(__name__)


def get_graph_stats(root: Value) -> Dict:
    """
    Collect statistics about the graph rooted at `root` (no output).

    Returns
    -------
    dict with keys nodes, edges, leaves, depth, max_fan_in, avg_fan_in,
    max_fan_out, avg_fan_out, operations ({op name: count}).
    """
    order = topological_order(root)
    index = {id(v): i for i, v in enumerate(order)}
    n_nodes = len(order)

    fan_ins = [len(v.operands) for v in order]
    fan_outs = [0] * n_nodes
    depth = [0] * n_nodes
    for i, v in enumerate(order):
        for operand in v.operands:
            j = index[id(operand)]
            fan_outs[j] += 1
            # operands precede consumers in `order`, so depth[j] is final
            depth[i] = max(depth[i], depth[j] + 1)

    op_counter = Counter(v.op.value for v in order)

    return {
        'nodes': n_nodes,
        'edges': sum(fan_ins),
        'leaves': sum(1 for v in order if v.is_leaf),
        'depth': depth[-1],
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter),
    }


def format_graph(root: Value, max_nodes: int = 20) -> str:
    """
    Render the graph one value per line, operands first:

        Node    0: leaf   (  2.000000) [leaf/input] x1
        Node    2: mul    ( -6.000000) <- [Node0, Node1]
    """
    order = topological_order(root)
    index = {id(v): i for i, v in enumerate(order)}
    lines: List[str] = []
    for i, v in enumerate(order[:max_nodes]):
        head = f"Node {i:4d}: {v.op.value:6s} ({float(v.data):10.6f})"
        if v.is_leaf:
            line = f"{head} [leaf/input]"
        else:
            parents = ", ".join(f"Node{index[id(p)]}" for p in v.operands)
            line = f"{head} <- [{parents}]"
        if v.label:
            line += f" {v.label}"
        lines.append(line)
    if len(order) > max_nodes:
        lines.append(f"... ({len(order) - max_nodes} more nodes)")
    return "\n".join(lines)


def log_graph_summary(root: Value, detailed: bool = False) -> Dict:
    """Log a summary of the graph at INFO (and the node list if `detailed`); return the stats."""
    stats = get_graph_stats(root)
    logger.info(
        "graph: %d nodes, %d edges, %d leaves, depth %d, max fan-in %d, max fan-out %d",
        stats['nodes'], stats['edges'], stats['leaves'], stats['depth'],
        stats['max_fan_in'], stats['max_fan_out'],
    )
    for op_name, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        logger.info("  %-6s: %6d (%5.1f%%)", op_name, count, pct)
    if detailed:
        logger.info("\n%s", format_graph(root, max_nodes=100))
    return stats
