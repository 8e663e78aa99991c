import base64
import logging

from graphviz import Digraph

logger = logging.getLogger(__name__)


def trace(root):
    # builds a set of all nodes and edges in a graph
    nodes, edges = set(), set()
    for v in root.topo():
        nodes.add(v)
        for child in v.children():
            edges.add((child, v))
    return nodes, edges


def draw_dot(root, format='svg', rankdir='LR'):
    """
    format: png | svg | ...
    rankdir: TB (top to bottom graph) | LR (left to right)
    """
    assert rankdir in ['LR', 'TB']
    nodes, edges = trace(root)
    logger.debug("drawing %d nodes, %d edges", len(nodes), len(edges))
    dot = Digraph(format=format, graph_attr={'rankdir': rankdir})

    for n in nodes:
        uid = str(n._id)
        # for any value in the graph, create a rectangular ('record') node for it
        dot.node(name=uid, label="{ data %.4f | grad %.4f }" % (n.data, n.grad), shape='record')
        if n.op:
            # if this value is a result of some operation, create an op node for it
            dot.node(name=uid + n.op, label=n.op)
            dot.edge(uid + n.op, uid)

    for n1, n2 in edges:
        # connect n1 to the op node of n2
        dot.edge(str(n1._id), str(n2._id) + n2.op)

    return dot


def render_base64(root, format='png'):
    # needs the graphviz `dot` executable on PATH
    data = draw_dot(root, format=format).pipe()
    return base64.standard_b64encode(data).decode('ascii')
