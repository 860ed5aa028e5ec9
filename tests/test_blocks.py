# File: tests/test_blocks.py
import pytest

from robots_scout.matcher.blocks import (
    INITIAL_STATE,
    BlockMode,
    BlockState,
    agent_matches,
    is_global_agent,
    transition,
)
from robots_scout.matcher.models import Scope
from robots_scout.parser.directives import Directive, DirectiveKind


def directive(kind, value="", line=1):
    return Directive(line_number=line, kind=kind, key=kind.value, value=value)


def run(*items, agent="FooBot"):
    state = INITIAL_STATE
    for kind, value in items:
        state = transition(state, directive(kind, value), agent)
    return state


UA = DirectiveKind.USER_AGENT
ALLOW = DirectiveKind.ALLOW
DISALLOW = DirectiveKind.DISALLOW


@pytest.mark.parametrize(
    "agent,expected",
    [("*", True), ("* ", True), ("*\tcomment", True), ("*Bot", False), ("FooBot", False)],
)
def test_is_global_agent(agent, expected):
    assert is_global_agent(agent) is expected


@pytest.mark.parametrize(
    "line_agent,target,expected",
    [
        ("FooBot", "FooBot", True),
        ("foobot", "FooBot", True),
        ("FooBot/1.2", "FooBot", True),
        ("FooBot 1.2", "FooBot", True),
        ("Foo Bot", "FooBot", False),
        ("BarBot", "FooBot", False),
        ("123", "", False),
    ],
)
def test_agent_matches(line_agent, target, expected):
    assert agent_matches(line_agent, target) is expected


def test_initial_state():
    assert INITIAL_STATE == BlockState(BlockMode.NO_BLOCK, False)
    assert not INITIAL_STATE.accepts_rules
    assert INITIAL_STATE.scope is None


def test_global_block():
    state = run((UA, "*"))
    assert state.mode is BlockMode.GLOBAL
    assert state.scope is Scope.GLOBAL


def test_specific_absorbs_global_in_same_block():
    assert run((UA, "*"), (UA, "FooBot")).mode is BlockMode.SPECIFIC
    assert run((UA, "FooBot"), (UA, "*")).mode is BlockMode.SPECIFIC


def test_other_agent_block_is_neither():
    state = run((UA, "BarBot"))
    assert state.mode is BlockMode.NEITHER
    assert state.scope is None


def test_rules_outside_any_block_change_nothing():
    assert run((DISALLOW, "/")) == INITIAL_STATE


def test_rules_start_then_user_agent_opens_new_block():
    state = run((UA, "FooBot"), (DISALLOW, "/"))
    assert state == BlockState(BlockMode.SPECIFIC, True)
    assert run((UA, "FooBot"), (DISALLOW, "/"), (UA, "BarBot")).mode is BlockMode.NEITHER
    assert run((UA, "BarBot"), (ALLOW, "/"), (UA, "*")).mode is BlockMode.GLOBAL


@pytest.mark.parametrize(
    "kind", [DirectiveKind.SITEMAP, DirectiveKind.CRAWL_DELAY, DirectiveKind.UNKNOWN]
)
def test_non_rule_directives_keep_block(kind):
    state = run((UA, "BarBot"), (kind, "x"), (UA, "FooBot"))
    assert state == BlockState(BlockMode.SPECIFIC, False)
