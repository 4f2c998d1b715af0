import shutil
import subprocess
from itertools import count
from pathlib import Path

from trees import NonTerminalTree, ParseTree, TerminalTree

DIR = "./graphs/"
DOT_FILENAME = "tree.dot"
GRAPH_TYPE = "pdf"


def graph_prologue() -> str:
    return (
        'digraph G {  graph [fontname = "Courier New", engine="sfdp"];\n'
        + ' node [fontname = "Courier", style = rounded];\n'
        + ' edge [fontname = "Courier"];'
    )


def graph_epilogue() -> str:
    return "}"


def escape(s: str) -> str:
    return (
        s.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace('"', '\\"')
        .replace("<", "\\<")
        .replace(">", "\\>")
        .replace("|", "\\|")
        .replace("{", "\\{")
        .replace("}", "\\}")
    )


def node_line(node_id: int, tree: ParseTree) -> str:
    match tree:
        case TerminalTree(symbol):
            return (
                f"   {node_id} [shape=doublecircle, style=filled, fillcolor=white, "
                f'fontcolor=black, label="{escape(symbol)}"];'
            )
        case NonTerminalTree(symbol, ()):
            # empty expansion
            return (
                f"   {node_id} [shape=record, style=filled, fillcolor=gray, "
                f'fontcolor=white, label="{escape(symbol)} → ε"];'
            )
        case NonTerminalTree(symbol, _):
            return (
                f"   {node_id} [shape=record, style=filled, fillcolor=black, "
                f'fontcolor=white, label="{escape(symbol)}"];'
            )
        case _:
            raise TypeError(f"Expected a parse tree, got {type(tree)}")


def tree_to_dot(root: ParseTree) -> list[str]:
    """Graphviz source for a parse tree.

    Equal subtrees are distinct nodes; ids are assigned in preorder."""
    graph = [graph_prologue()]
    edges: list[str] = []
    nodes: list[str] = []
    ids = count()

    def visit(tree: ParseTree) -> int:
        node_id = next(ids)
        nodes.append(node_line(node_id, tree))
        if isinstance(tree, NonTerminalTree):
            for child in tree.children:
                child_id = visit(child)
                edges.append(
                    f"    {node_id}:from_false -> {child_id}:from_node [arrowhead=vee] "
                )
        return node_id

    visit(root)
    graph.extend(edges)
    graph.extend(nodes)
    graph.append(graph_epilogue())
    return graph


def create_graph_pdf(
    graph: list[str],
    output_filename: str,
    dot_filename: str = DOT_FILENAME,
    output_filetype: str = GRAPH_TYPE,
) -> Path:
    dot_exec_filepath = shutil.which("dot")
    if dot_exec_filepath is None:
        raise FileNotFoundError("graphviz 'dot' executable not found on PATH")

    directory = Path(DIR)
    directory.mkdir(parents=True, exist_ok=True)
    output_filepath = directory / output_filename
    dot_filepath = directory / dot_filename

    dot_filepath.write_text("\n".join(graph))

    args = [
        dot_exec_filepath,
        f"-T{output_filetype}",
        f"-Gdpi={96}",
        str(dot_filepath),
        "-o",
        str(output_filepath),
    ]
    subprocess.run(args, check=True)
    return output_filepath


def draw_tree(root: ParseTree, output_filename: str = "tree.pdf") -> Path:
    return create_graph_pdf(tree_to_dot(root), output_filename=output_filename)
