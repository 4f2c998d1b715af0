import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from rich import print as rprint
from rich.logging import RichHandler
from rich.pretty import pretty_repr
from rich.traceback import install
from rich.tree import Tree

from derivations import LIMIT
from explorer import Gallery, all_derivations, derive_sentence, grammar_issues
from grammar import Grammar, GrammarProperties
from regexpr import LANG_LIMIT, regex_language
from trees import NonTerminalTree, ParseTree, TerminalTree, draw_tree, to_svg
from utils.dot import draw_tree as draw_tree_pdf

logger = logging.getLogger(__name__)

install(show_locals=False)


def rule_pair(text: str) -> tuple[str, str]:
    """A production given on the command line as lhs=alternatives"""
    lhs, sep, rhs = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected lhs=rhs, got {text!r}")
    return lhs, rhs


def to_rich_tree(tree: ParseTree, parent: Optional[Tree] = None) -> Tree:
    match tree:
        case TerminalTree(symbol):
            label = f"[bold blue]{symbol}[/bold blue]"
        case NonTerminalTree(symbol, ()):
            label = f"[bold red]{symbol}[/bold red] [bold cyan]ε[/bold cyan]"
        case _:
            label = f"[bold red]{tree.symbol}[/bold red]"
    node = Tree(label) if parent is None else parent.add(label)
    if isinstance(tree, NonTerminalTree):
        for child in tree.children:
            to_rich_tree(child, node)
    return node


def show_gallery(gallery: Gallery, max_trees: int) -> None:
    rprint(f"[bold]{gallery.caption}[/bold]")
    for tree in gallery.trees[:max_trees]:
        rprint(f"[italic]{tree.sentence or 'ε'}[/italic]")
        rprint(to_rich_tree(tree))
    if len(gallery.trees) > max_trees:
        rprint(f"... and {len(gallery.trees) - max_trees} more")


def save_gallery(
    gallery: Gallery, max_trees: int, svg_dir: Optional[Path], pdf: bool
) -> None:
    """Write the shown trees as SVG files, and the first through graphviz"""
    if svg_dir is not None:
        svg_dir.mkdir(parents=True, exist_ok=True)
        for i, tree in enumerate(gallery.trees[:max_trees]):
            (svg_dir / f"tree_{i}.svg").write_text(to_svg(draw_tree(tree)))
        logger.info(
            "wrote %d trees to %s", min(max_trees, len(gallery.trees)), svg_dir
        )
    if pdf and gallery.trees:
        rprint(f"Rendered {draw_tree_pdf(gallery.trees[0])}")


def show_issues(grammar: Grammar) -> None:
    issues = grammar_issues(grammar)
    if issues:
        rprint("This grammar has the following problems:")
        for issue in issues:
            rprint(f"  • {issue}")


def add_output_arguments(command: argparse.ArgumentParser) -> None:
    command.add_argument("--svg", type=Path, default=None, metavar="DIR")
    command.add_argument("--pdf", action="store_true", help="render with graphviz")


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Explore context free grammars and regular expressions"
    )
    ap.add_argument("--verbose", action="store_true")
    commands = ap.add_subparsers(dest="command", required=True)

    check = commands.add_parser("check", help="report grammar problems")
    check.add_argument("rules", nargs="+", type=rule_pair)

    derive = commands.add_parser("derive", help="enumerate derivation trees")
    derive.add_argument("rules", nargs="+", type=rule_pair)
    derive.add_argument("--depth", type=int, default=None)
    derive.add_argument("--limit", type=int, default=LIMIT)
    derive.add_argument("--max-trees", type=int, default=20)
    add_output_arguments(derive)

    parse = commands.add_parser("parse", help="derivation trees of a sentence")
    parse.add_argument("rules", nargs="+", type=rule_pair)
    parse.add_argument("--sentence", required=True)
    parse.add_argument("--max-trees", type=int, default=20)
    add_output_arguments(parse)

    regex = commands.add_parser("regex", help="strings of a regular expression")
    regex.add_argument("expression")
    regex.add_argument("--budget", type=int, default=LANG_LIMIT)
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )

    if args.command == "regex":
        rprint(regex_language(args.expression, args.budget))
        return 0

    try:
        grammar = Grammar.from_rules(args.rules)
    except ValueError as e:
        rprint(f"[bold red]Malformed grammar:[/bold red] {e}")
        return 1
    if args.verbose:
        rprint(pretty_repr(grammar))

    show_issues(grammar)
    if args.command == "check":
        if grammar:
            rprint(str(GrammarProperties(grammar).to_pretty_table()))
    else:
        if args.command == "derive":
            gallery = all_derivations(grammar, limit=args.limit, max_depth=args.depth)
        else:
            gallery = derive_sentence(grammar, args.sentence)
        show_gallery(gallery, args.max_trees)
        save_gallery(gallery, args.max_trees, args.svg, args.pdf)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
