# model/sentence_graph.py
# This file is part of PRR-Engine - A B4 Fixed-Point Solver
#
# Validated, immutable graph of named sentences

"""Construction and dependency analysis of sentence graphs.

A SentenceGraph is built once from a set of named definitions and is
read-only afterwards, so it can be shared between concurrent solver runs.
Construction validates every formula node and every reference before the
graph becomes visible: a malformed node or an unknown name aborts
construction with no partial graph left behind.

References induce a dependency graph (sentence -> referenced sentence) that
may contain cycles, self-reference included. The graph precomputes its
strongly connected components; two sentences in the same component depend
on each other, which is what the solver treats as a cyclic reference.
"""

import re
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator, List, Tuple, Union

from core.exceptions import MalformedFormulaError, UndefinedReferenceError
from formula_parser import ParseError, parse_definitions, parse_formula
from formula_parser.ast_nodes import And, Expr, Literal, Not, Or, Reference
from formula_parser.lexer import KEYWORDS
from logic.truth_value import TruthValue
from utils.logger import get_logger

from .assignment import Assignment
from .sentence import Sentence

NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*\Z")
COMMENT_PATTERN = re.compile(r"#.*")

Definitions = Union[Mapping, Iterable[Tuple[str, Union[Expr, str]]]]


class SentenceGraph(Mapping):
    """Immutable mapping from sentence name to Sentence.

    Args:
        definitions: Mapping or iterable of (name, formula) pairs. A formula
            is either an AST node or formula text.

    Raises:
        MalformedFormulaError: Invalid name, unparsable formula text, or an
            unsupported/ill-formed node
        UndefinedReferenceError: A formula references an undefined name
    """

    def __init__(self, definitions: Definitions = ()):
        logger = get_logger()

        pairs = definitions.items() if isinstance(definitions, Mapping) else definitions
        sentences: Dict[str, Sentence] = {}

        for name, formula in pairs:
            _validate_name(name)
            if name in sentences:
                raise MalformedFormulaError(name, "sentence is defined more than once")
            if isinstance(formula, str):
                formula = _parse_text(name, formula)
            _validate_node(name, formula)
            sentences[name] = Sentence(name, formula)

        edges: Dict[str, Tuple[str, ...]] = {}
        for sentence in sentences.values():
            refs = sentence.references
            for ref in refs:
                if ref not in sentences:
                    raise UndefinedReferenceError(sentence.name, ref)
            edges[sentence.name] = refs

        self._sentences = sentences
        self._edges = edges
        self._components = _strongly_connected_components(list(sentences), edges)
        self._component_index = {
            name: idx for idx, comp in enumerate(self._components) for name in comp
        }

        logger.graph_built(len(sentences), sum(1 for n in sentences if self.is_cyclic(n)))

    @classmethod
    def from_source(cls, source: str) -> "SentenceGraph":
        """Build a graph from definition text (``name := formula`` lines).

        Text holding only comments and whitespace yields an empty graph.

        Raises:
            MalformedFormulaError: The text does not parse
            UndefinedReferenceError: A formula references an undefined name
        """
        if not COMMENT_PATTERN.sub("", source).strip():
            return cls()
        try:
            definitions = parse_definitions(source)
        except ParseError as e:
            raise MalformedFormulaError(None, str(e)) from e
        return cls(definitions)

    # Mapping protocol
    def __getitem__(self, name: str) -> Sentence:
        return self._sentences[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._sentences)

    def __len__(self) -> int:
        return len(self._sentences)

    def __repr__(self) -> str:
        return f"SentenceGraph({', '.join(self._sentences)})"

    @property
    def names(self) -> Tuple[str, ...]:
        """Sentence names in definition order."""
        return tuple(self._sentences)

    def dependencies(self, name: str) -> Tuple[str, ...]:
        """Names directly referenced by the formula of `name`."""
        return self._edges[name]

    def components(self) -> List[Tuple[str, ...]]:
        """Strongly connected components, dependencies before dependents."""
        return list(self._components)

    def component_of(self, name: str) -> Tuple[str, ...]:
        return self._components[self._component_index[name]]

    def is_cyclic(self, name: str) -> bool:
        """Whether `name` lies on a dependency cycle (self-reference included)."""
        return len(self.component_of(name)) > 1 or name in self._edges[name]

    def cyclic_references(self, name: str) -> Tuple[str, ...]:
        """References of `name` that lead back to `name`."""
        component = self._component_index[name]
        return tuple(
            ref for ref in self._edges[name] if self._component_index[ref] == component
        )

    def initial_assignment(self) -> Assignment:
        """All-NEITHER assignment, the bottom of the product lattice."""
        return Assignment.bottom(self._sentences)

    def to_source(self) -> str:
        """Render the graph back to definition text."""
        return "\n".join(str(sentence) for sentence in self._sentences.values())


def _validate_name(name) -> None:
    if not isinstance(name, str) or not NAME_PATTERN.match(name):
        raise MalformedFormulaError(
            name if isinstance(name, str) else None,
            f"invalid sentence name {name!r}",
        )
    if name in KEYWORDS:
        raise MalformedFormulaError(name, f"'{name}' is a reserved truth value keyword")


def _parse_text(name: str, text: str) -> Expr:
    try:
        return parse_formula(text)
    except ParseError as e:
        raise MalformedFormulaError(name, str(e)) from e


def _validate_node(sentence: str, node) -> None:
    """Check that `node` is a well-formed formula tree."""
    pending = [node]
    while pending:
        current = pending.pop()
        if isinstance(current, Literal):
            if not isinstance(current.value, TruthValue):
                raise MalformedFormulaError(
                    sentence, f"literal holds {current.value!r}, not a truth value"
                )
        elif isinstance(current, Reference):
            if not isinstance(current.name, str) or not current.name:
                raise MalformedFormulaError(
                    sentence, f"reference has invalid name {current.name!r}"
                )
        elif isinstance(current, Not):
            pending.append(current.operand)
        elif isinstance(current, (And, Or)):
            pending.append(current.left)
            pending.append(current.right)
        else:
            raise MalformedFormulaError(
                sentence, f"unsupported expression node {type(current).__name__}"
            )


def _strongly_connected_components(
    nodes: List[str], edges: Dict[str, Tuple[str, ...]]
) -> List[Tuple[str, ...]]:
    """Tarjan's algorithm, iterative so deep chains do not exhaust the stack.

    Components come out in reverse topological order of the dependency
    graph, i.e. every component after all components it depends on.
    """
    order = {name: pos for pos, name in enumerate(nodes)}
    index_of: Dict[str, int] = {}
    lowlink: Dict[str, int] = {}
    stack: List[str] = []
    on_stack = set()
    components: List[Tuple[str, ...]] = []
    counter = 0

    for root in nodes:
        if root in index_of:
            continue

        index_of[root] = lowlink[root] = counter
        counter += 1
        stack.append(root)
        on_stack.add(root)
        work = [(root, iter(edges[root]))]

        while work:
            node, children = work[-1]
            for child in children:
                if child not in index_of:
                    index_of[child] = lowlink[child] = counter
                    counter += 1
                    stack.append(child)
                    on_stack.add(child)
                    work.append((child, iter(edges[child])))
                    break
                if child in on_stack:
                    lowlink[node] = min(lowlink[node], index_of[child])
            else:
                work.pop()
                if work:
                    parent = work[-1][0]
                    lowlink[parent] = min(lowlink[parent], lowlink[node])
                if lowlink[node] == index_of[node]:
                    members = []
                    while True:
                        member = stack.pop()
                        on_stack.discard(member)
                        members.append(member)
                        if member == node:
                            break
                    components.append(tuple(sorted(members, key=order.__getitem__)))

    return components
