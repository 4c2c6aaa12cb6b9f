"""Tests for the model constants module."""
from __future__ import annotations

import ast
import inspect

import atlasintercept.utils.constants as constants


def _constant_names(node: ast.stmt) -> list[str]:
    if isinstance(node, ast.AnnAssign) and isinstance(node.target, ast.Name):
        return [node.target.id]
    if isinstance(node, ast.Assign):
        return [t.id for t in node.targets if isinstance(t, ast.Name)]
    return []


def test_every_constant_is_documented():
    """Each public constant is followed by its own docstring."""
    body = ast.parse(inspect.getsource(constants)).body
    undocumented = []
    for node, following in zip(body, body[1:] + [None]):
        names = [n for n in _constant_names(node) if n.isupper()]
        documented = (
            isinstance(following, ast.Expr)
            and isinstance(following.value, ast.Constant)
            and isinstance(following.value.value, str)
        )
        if names and not documented:
            undocumented.extend(names)
    assert undocumented == []


def test_success_bounds_are_ordered():
    assert 0.0 <= constants.SUCCESS_FLOOR < constants.SUCCESS_THRESHOLD < constants.SUCCESS_CEILING <= 1.0
