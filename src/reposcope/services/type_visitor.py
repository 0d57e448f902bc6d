"""Type visitor — one class record per class or interface declaration."""

from __future__ import annotations

import logging
from typing import Any, Iterator

from javalang import tree

from reposcope.domain.entities import ClassKind, ClassRecord
from reposcope.services.aggregator import AnalysisState
from reposcope.services.java_parser import ParsedUnit
from reposcope.services.method_analyzer import analyze_method

logger = logging.getLogger(__name__)

TypeDeclaration = tree.ClassDeclaration | tree.InterfaceDeclaration


def iter_type_declarations(node: Any) -> Iterator[TypeDeclaration]:
    """Every class/interface declaration beneath ``node``, nested ones first.

    Enum and annotation declarations are walked through but not yielded;
    anonymous class bodies are not declarations.
    """
    if isinstance(node, tree.Node):
        for child in node.children:
            yield from iter_type_declarations(child)
        if isinstance(node, (tree.ClassDeclaration, tree.InterfaceDeclaration)):
            yield node
    elif isinstance(node, (list, tuple)):
        for item in node:
            yield from iter_type_declarations(item)


def classify(declaration: TypeDeclaration) -> ClassKind:
    """Interface wins over ``abstract``; anything else is a regular class."""
    if isinstance(declaration, tree.InterfaceDeclaration):
        return ClassKind.INTERFACE
    if is_abstract(declaration):
        return ClassKind.ABSTRACT_CLASS
    return ClassKind.REGULAR_CLASS


def is_abstract(declaration: TypeDeclaration) -> bool:
    return "abstract" in (declaration.modifiers or ())


def visit_compilation_unit(unit: ParsedUnit, state: AnalysisState) -> None:
    """Append a :class:`ClassRecord` to ``state`` for every declared type in ``unit``."""
    for declaration in iter_type_declarations(unit.tree):
        logger.debug("Found class/interface: %s", declaration.name)
        record = ClassRecord(class_name=declaration.name, kind=classify(declaration))

        if isinstance(declaration, tree.InterfaceDeclaration):
            state.increment("interfaces")
            logger.debug("Class is an Interface.")
        if is_abstract(declaration):
            state.increment("abstract_classes")
            logger.debug("Class is Abstract.")

        for method in declaration.methods:
            record.methods.append(analyze_method(method, unit, state))
            state.increment("total_methods")
            logger.debug("Method found: %s", method.name)

        state.add_class(record)
        total = state.increment("total_classes")
        logger.debug("Total classes so far: %d", total)
