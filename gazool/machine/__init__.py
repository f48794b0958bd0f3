from gazool.machine.machine import GameMachine
from gazool.machine.session import GameSession
from gazool.machine.states import GameState
from gazool.machine.transitions import Effect, EffectKind, Event, EventKind, Transition, transition

__all__ = [
    "GameMachine",
    "GameSession",
    "GameState",
    "Effect",
    "EffectKind",
    "Event",
    "EventKind",
    "Transition",
    "transition",
]
