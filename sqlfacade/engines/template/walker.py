"""
Variable walker: collect raw identifier references from a Jinja2 tree.

``find_variables`` dispatches on the statement kind; ``find_variables_from_pipe``
reads an expression (a "pipe": filters, calls, attribute chains) and returns
the root identifier of every field reference in it. Results are raw: they
still contain sub-template names and duplicates, which
``variables.extract_template_variables`` removes afterwards.

``bound`` holds the names bound in the scope being walked (set/for/with
targets, macro parameters). A reference to one of them is local, not an
input; the same name outside that scope is still reported.
"""

from collections.abc import Iterable

from jinja2 import nodes

from sqlfacade.engines.template.names import (
    LOOP_IMPLICIT,
    bound_by,
    macro_parameters,
    target_names,
)
from sqlfacade.models import ExtractionMode


def find_variables_from_pipe(
    expr: nodes.Node | None,
    functions: frozenset[str] = frozenset(),
    bound: frozenset[str] = frozenset(),
) -> list[str]:
    """Root identifiers referenced by *expr*, in source order."""
    if expr is None:
        return []
    if isinstance(expr, nodes.Name):
        if expr.ctx == "load" and expr.name not in functions and expr.name not in bound:
            return [expr.name]
        return []
    if isinstance(expr, (nodes.Const, nodes.TemplateData)):
        return []
    # Nested pipe: attribute/item chains, filter and call arguments, operators.
    variables: list[str] = []
    for child in expr.iter_child_nodes():
        variables.extend(find_variables_from_pipe(child, functions, bound))
    return variables


def _from_pipes(
    exprs: Iterable[nodes.Node | None],
    functions: frozenset[str],
    bound: frozenset[str],
) -> list[str]:
    variables: list[str] = []
    for expr in exprs:
        variables.extend(find_variables_from_pipe(expr, functions, bound))
    return variables


def find_body_variables(
    body: Iterable[nodes.Node],
    *,
    functions: frozenset[str] = frozenset(),
    mode: ExtractionMode = ExtractionMode.GUARD_ONLY,
    bound: frozenset[str] = frozenset(),
) -> list[str]:
    """Walk a statement list; names bound by a statement hide later references."""
    variables: list[str] = []
    for node in body:
        variables.extend(
            find_variables(node, functions=functions, mode=mode, bound=bound)
        )
        names = bound_by(node)
        if names:
            bound = bound | names
    return variables


def find_definition_variables(
    definition: nodes.Macro | nodes.Block,
    *,
    functions: frozenset[str] = frozenset(),
    mode: ExtractionMode = ExtractionMode.GUARD_ONLY,
    bound: frozenset[str] = frozenset(),
) -> list[str]:
    """Walk the body of a macro or block, its parameters bound."""
    if isinstance(definition, nodes.Macro):
        bound = bound | macro_parameters(definition)
    return find_body_variables(
        definition.body, functions=functions, mode=mode, bound=bound
    )


def find_variables(
    node: nodes.Node,
    *,
    functions: frozenset[str] = frozenset(),
    mode: ExtractionMode = ExtractionMode.GUARD_ONLY,
    bound: frozenset[str] = frozenset(),
) -> list[str]:
    """Raw identifiers referenced by *node*.

    In GUARD_ONLY mode (the default) if/with/for blocks contribute their
    guard expression only; references inside the block body are not
    collected. This matches the behaviour existing callers depend on but is
    probably an omission: FULL mode also walks bodies and else branches.
    """
    full = mode == ExtractionMode.FULL

    def pipe(expr: nodes.Node | None, scope: frozenset[str] = bound) -> list[str]:
        return find_variables_from_pipe(expr, functions, scope)

    def body(stmts: Iterable[nodes.Node], scope: frozenset[str] = bound) -> list[str]:
        return find_body_variables(stmts, functions=functions, mode=mode, bound=scope)

    if isinstance(node, nodes.Output):
        return _from_pipes(node.nodes, functions, bound)

    if isinstance(node, nodes.If):
        variables = pipe(node.test)
        if full:
            variables += body(node.body)
            variables += body(node.elif_)
            variables += body(node.else_)
        return variables

    if isinstance(node, nodes.For):
        variables = pipe(node.iter)
        if full:
            inner = bound | target_names(node.target) | LOOP_IMPLICIT
            variables += pipe(node.test, inner)
            variables += body(node.body, inner)
            variables += body(node.else_)
        return variables

    if isinstance(node, nodes.With):
        variables = _from_pipes(node.values, functions, bound)
        if full:
            inner = bound
            for target in node.targets:
                inner = inner | target_names(target)
            variables += body(node.body, inner)
        return variables

    if isinstance(node, nodes.CallBlock):
        variables = pipe(node.call)
        if full:
            variables += body(node.body, bound | macro_parameters(node))
        return variables

    if isinstance(node, nodes.FilterBlock):
        variables = pipe(node.filter)
        if full:
            variables += body(node.body)
        return variables

    # {% autoescape %} and internal scopes are transparent wrappers.
    if isinstance(node, nodes.ScopedEvalContextModifier):
        return _from_pipes(node.options, functions, bound) + body(node.body)

    if isinstance(node, nodes.EvalContextModifier):
        return _from_pipes(node.options, functions, bound)

    if isinstance(node, nodes.Scope):
        return body(node.body)

    # Template inclusion: the name is resolved later against the defined
    # sub-templates; an unknown one stays in the result.
    if isinstance(node, nodes.Include):
        if isinstance(node.template, nodes.Const) and isinstance(
            node.template.value, str
        ):
            return [node.template.value]
        return pipe(node.template)

    # A block renders in place; its body is walked as a sub-template.
    if isinstance(node, nodes.Block):
        return [node.name]

    # The value is read; the declared name only binds later statements.
    if isinstance(node, nodes.Assign):
        return pipe(node.node)

    if isinstance(node, nodes.AssignBlock):
        variables = pipe(node.filter)
        if full:
            variables += body(node.body)
        return variables

    if isinstance(node, nodes.Expr):
        return pipe(node)

    # Macro (walked as a sub-template), Extends, Import, comments, unknown kinds.
    return []
