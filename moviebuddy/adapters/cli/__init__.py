"""
Shell interactif de MovieBuddy.

- parser : decoupage des lignes et resolution des commandes
- actions : implementations de quit, directedBy, releasedYearBy
- dispatcher : table des actions et boucle de lecture
"""

from moviebuddy.adapters.cli.actions import ActionResult, CommandActions, Outcome
from moviebuddy.adapters.cli.dispatcher import PROMPT, CommandDispatcher, run
from moviebuddy.adapters.cli.parser import Command, parse, tokenize

__all__ = [
    "ActionResult",
    "Command",
    "CommandActions",
    "CommandDispatcher",
    "Outcome",
    "PROMPT",
    "parse",
    "run",
    "tokenize",
]
