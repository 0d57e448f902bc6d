"""Method analyzer — features, call edges and control flow of one method.

Only the *direct* statements of the method body are classified: a loop
nested inside an ``if`` does not make the method a looping one.  Call
expressions, on the other hand, are collected from the whole subtree of
each direct statement.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

from javalang import tree

from reposcope.domain.entities import CallEdge, ControlFlowEntry, ControlFlowKind, MethodRecord
from reposcope.services.aggregator import AnalysisState
from reposcope.services.java_parser import ParsedUnit
from reposcope.services.statement_text import render_statement

logger = logging.getLogger(__name__)

_CALL_TYPES = (tree.MethodInvocation, tree.SuperMethodInvocation)


def _is_labeled(statement: tree.Node) -> bool:
    # ``outer: for (...)`` is a labeled statement, not a loop
    return getattr(statement, "label", None) is not None


def is_loop(statement: tree.Node) -> bool:
    """``while`` and basic ``for``; enhanced-for and do-while are not loops here."""
    if _is_labeled(statement):
        return False
    if isinstance(statement, tree.WhileStatement):
        return True
    return isinstance(statement, tree.ForStatement) and isinstance(
        statement.control, tree.ForControl
    )


def is_conditional(statement: tree.Node) -> bool:
    return isinstance(statement, tree.IfStatement) and not _is_labeled(statement)


def iter_called_names(node: Any) -> Iterator[str]:
    """Simple names of every method call beneath ``node``.

    Calls come out outermost first: in ``a(x()).b()`` that is ``b``, then its
    receiver ``a``, then ``a``'s argument ``x``.  javalang stores such a chain
    as a flat ``selectors`` list on its first primary, so the chain is unwound
    from the last selector backwards.
    """
    if isinstance(node, tree.Node):
        yield from _iter_chain(node, list(getattr(node, "selectors", None) or ()))
    elif isinstance(node, (list, tuple)):
        for item in node:
            yield from iter_called_names(item)


def _iter_chain(primary: tree.Node, selectors: list[tree.Node]) -> Iterator[str]:
    if not selectors:
        if isinstance(primary, _CALL_TYPES):
            yield primary.member
        yield from _iter_own_children(primary)
        return
    outer = selectors[-1]
    if isinstance(outer, _CALL_TYPES):
        yield outer.member
    yield from _iter_chain(primary, selectors[:-1])
    yield from _iter_own_children(outer)


def _iter_own_children(node: tree.Node) -> Iterator[str]:
    for attr in node.attrs:
        if attr != "selectors":
            yield from iter_called_names(getattr(node, attr))


def analyze_method(
    method: tree.MethodDeclaration,
    unit: ParsedUnit,
    state: AnalysisState,
) -> MethodRecord:
    """Build the method's record, feeding call edges and control flow into ``state``."""
    name = method.name
    contains_loops = False
    contains_conditionals = False

    # abstract and interface methods have no body at all
    for statement in method.body or []:
        if is_loop(statement):
            contains_loops = True
            state.increment("methods_with_loops")
            state.add_control_flow(
                ControlFlowEntry(name, ControlFlowKind.LOOP, render_statement(unit, statement))
            )
        if is_conditional(statement):
            contains_conditionals = True
            state.increment("methods_with_conditionals")
            state.add_control_flow(
                ControlFlowEntry(name, ControlFlowKind.CONDITIONAL, render_statement(unit, statement))
            )
        for called in iter_called_names(statement):
            state.add_call(CallEdge(caller=name, called_method=called))

    logger.debug(
        "Method analysis for %s - Loops: %s, Conditionals: %s",
        name,
        contains_loops,
        contains_conditionals,
    )
    return MethodRecord(
        name=name,
        contains_loops=contains_loops,
        contains_conditionals=contains_conditionals,
    )
