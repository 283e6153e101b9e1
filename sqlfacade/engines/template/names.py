"""
Names that look like variables but are not template inputs.

- Sub-template names: the root template plus every macro / block. These are
  removed from the result template-wide.
- Local bindings ({% set %}, loop and with targets, macro parameters,
  imports). These only hide references inside the scope that binds them;
  the walker threads them down as a ``bound`` set.
"""

from jinja2 import nodes

from sqlfacade.engines.template.compiler import CompiledTemplate

LOOP_IMPLICIT = frozenset({"loop"})
MACRO_IMPLICIT = frozenset({"caller", "varargs", "kwargs"})


def collect_template_names(compiled: CompiledTemplate) -> set[str]:
    """Every name under which a template is registered, root included."""
    names = {compiled.name}
    names.update(compiled.definitions)
    return names


def target_names(target: nodes.Node | None) -> set[str]:
    """Names stored by an assignment / loop / with target (tuples unpacked)."""
    if target is None:
        return set()
    if isinstance(target, nodes.Name):
        return {target.name} if target.ctx in ("store", "param") else set()
    names: set[str] = set()
    for child in target.iter_child_nodes():
        names |= target_names(child)
    return names


def bound_by(node: nodes.Node) -> set[str]:
    """Names a statement binds for the statements that follow it."""
    if isinstance(node, (nodes.Assign, nodes.AssignBlock)):
        return target_names(node.target)
    if isinstance(node, nodes.Import):
        return {node.target}
    if isinstance(node, nodes.FromImport):
        return {item[1] if isinstance(item, tuple) else item for item in node.names}
    return set()


def macro_parameters(macro: nodes.Macro | nodes.CallBlock) -> frozenset[str]:
    """Parameters of a macro or call block plus its implicit helpers."""
    params: set[str] = set()
    for arg in macro.args:
        params |= target_names(arg)
    return frozenset(params) | MACRO_IMPLICIT


def top_level_bindings(compiled: CompiledTemplate) -> frozenset[str]:
    """Names bound by statements directly in the root body.

    They are exported to the template context, so macros and blocks see them.
    """
    bound: set[str] = set()
    for node in compiled.root.body:
        bound |= bound_by(node)
    return frozenset(bound)
