# File: robots_scout/matcher/blocks.py
"""robots_scout.matcher.blocks: User-agent block tracking as a small state machine.

A block is a run of ``User-agent`` lines followed by the rules that apply to
them. Consecutive ``User-agent`` lines share one block; the first
``User-agent`` seen after an Allow/Disallow starts a new one. Sitemap,
Crawl-delay and unknown directives leave the state untouched.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Final, Optional

from robots_scout.matcher.models import Scope
from robots_scout.parser.directives import Directive, DirectiveKind
from robots_scout.utils import extract_user_agent

__all__ = (
    "WILDCARD_AGENT",
    "BlockMode",
    "BlockState",
    "INITIAL_STATE",
    "is_global_agent",
    "agent_matches",
    "transition",
)

WILDCARD_AGENT: Final[str] = "*"


class BlockMode(enum.Enum):
    NO_BLOCK = "no-block"
    GLOBAL = "global"
    SPECIFIC = "specific"
    NEITHER = "neither"


@dataclass(frozen=True, slots=True)
class BlockState:
    """Current block mode plus whether rules were already seen in it."""

    mode: BlockMode = BlockMode.NO_BLOCK
    rules_started: bool = False

    @property
    def accepts_rules(self) -> bool:
        return self.mode in (BlockMode.GLOBAL, BlockMode.SPECIFIC)

    @property
    def scope(self) -> Optional[Scope]:
        """Scope of rules stored in this block, ``None`` if they are ignored."""
        if self.mode is BlockMode.SPECIFIC:
            return Scope.SPECIFIC
        if self.mode is BlockMode.GLOBAL:
            return Scope.GLOBAL
        return None


INITIAL_STATE: Final[BlockState] = BlockState()


def is_global_agent(user_agent: str) -> bool:
    """``*`` alone, or ``*`` followed by whitespace, names every crawler."""
    if not user_agent.startswith(WILDCARD_AGENT):
        return False
    return len(user_agent) == 1 or user_agent[1].isspace()


def agent_matches(user_agent: str, target_agent: str) -> bool:
    """Compare the product token of *user_agent* with *target_agent*, ignoring case."""
    token = extract_user_agent(user_agent)
    return bool(token) and token.lower() == target_agent.lower()


def transition(state: BlockState, directive: Directive, target_agent: str) -> BlockState:
    """Return the block state after *directive*."""
    kind = directive.kind

    if kind is DirectiveKind.USER_AGENT:
        if state.rules_started:
            state = INITIAL_STATE
        if is_global_agent(directive.value):
            # a block naming both "*" and the target stays specific
            if state.mode is BlockMode.SPECIFIC:
                return state
            return replace(state, mode=BlockMode.GLOBAL)
        if agent_matches(directive.value, target_agent):
            return replace(state, mode=BlockMode.SPECIFIC)
        if state.mode is BlockMode.NO_BLOCK:
            return replace(state, mode=BlockMode.NEITHER)
        return state

    if kind in (DirectiveKind.ALLOW, DirectiveKind.DISALLOW):
        if state.mode is BlockMode.NO_BLOCK or state.rules_started:
            return state
        return replace(state, rules_started=True)

    return state
