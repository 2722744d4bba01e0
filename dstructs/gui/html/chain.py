import html
import inspect
from typing import Any

from dstructs.linkedlist import LinkedList
from dstructs.linkedlist.node import Node, iter_nodes

css = """
chain {
    display: flex;
    align-items: center;
    gap: 8px;
    font-family: monospace;
}
.node {
    border: 1px solid black;
    padding: 4px 8px;
    cursor: pointer;
}
.node .index {
    color: grey;
    font-size: smaller;
}
.link::after {
    content: "\\2192";
}
.nil::after {
    content: "\\2205";
}
"""


def node_html(list_name: str, node: Node[Any]) -> str:
    node_path = f"/{html.escape(list_name)}/nodes/{node.index}"
    return (
        f'<div class="node" id="node-{node.index}"'
        f' hx-delete="{node_path}" hx-target="closest chain"'
        ' hx-swap="outerHTML">'
        f'<span class="index">{node.index}</span> '
        f"{html.escape(repr(node.element))}</div>"
    )


def chain_html(list_name: str, lst: LinkedList[Any]) -> str:
    """Nodes in chain order, each labelled with its cached index"""
    parts = [
        f'{node_html(list_name, node)}<span class="link"></span>'
        for node in iter_nodes(lst._head)
    ]
    append_path = f"/{html.escape(list_name)}/nodes/{len(lst)}"
    return inspect.cleandoc(
        f"""
        <chain>
            {"".join(parts)}<span class="nil"></span>
            <form hx-put="{append_path}" hx-target="closest chain" hx-swap="outerHTML">
                <input name="element" type="number" required>
            </form>
        </chain>
        """
    )


def chain_page_html(list_name: str, lst: LinkedList[Any]) -> str:
    return inspect.cleandoc(
        f"""
        <!doctype html>
        <html>
            <head>
                <title>{html.escape(list_name)}</title>
                <style>{css}</style>
                <script src="https://unpkg.com/htmx.org@2.0.3"></script>
            </head>
            <body>
                <p>size {lst.size()}, element size {lst.element_size} bytes</p>
                {chain_html(list_name, lst)}
            </body>
        </html>
        """
    )
