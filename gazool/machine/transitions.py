"""Pure transition function of the game state machine.

`transition(state, event)` never touches a session or a console. It
returns the next state and the effects the caller must carry out. Some
effects produce an outcome (did the shift move anything? is the
animation over?), which the caller feeds back as a follow-up event.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, NamedTuple, Optional

from gazool.config import DIFFICULTY_LEVELS
from gazool.console import keys
from gazool.fields.shift import Action
from gazool.machine.states import GameState


class EventKind(Enum):
    TICK = auto()
    KEY = auto()
    SHIFTED = auto()
    ANIMATED = auto()
    WIN_CHECKED = auto()
    LOSS_CHECKED = auto()


@dataclass(frozen=True)
class Event:
    kind: EventKind
    value: int | bool | None = None


TICK = Event(EventKind.TICK)


def key_event(key: int) -> Event:
    return Event(EventKind.KEY, key)


class EffectKind(Enum):
    RENDER_TITLE = auto()
    RENDER_INSTRUCTIONS = auto()
    RENDER_DIFFICULTY = auto()
    RENDER_BOARD = auto()
    RENDER_VICTORY = auto()
    RENDER_DEFEAT = auto()
    SELECT_DIFFICULTY = auto()
    RESET_ROUND = auto()
    INSERT_TILE = auto()
    ADVANCE_TIMER = auto()
    SHIFT = auto()
    ANIMATE = auto()
    CLEAR_ANIMATIONS = auto()
    CHECK_WIN = auto()
    CHECK_LOSS = auto()
    QUIT = auto()


@dataclass(frozen=True)
class Effect:
    kind: EffectKind
    value: int | None = None


class Transition(NamedTuple):
    state: GameState
    effects: tuple[Effect, ...] = ()
    # Process the next state within the same tick
    immediate: bool = False


DIRECTION_KEYS = {
    keys.KEY_UP: Action.UP,
    keys.KEY_DOWN: Action.DOWN,
    keys.KEY_LEFT: Action.LEFT,
    keys.KEY_RIGHT: Action.RIGHT,
    ord("w"): Action.UP,
    ord("s"): Action.DOWN,
    ord("a"): Action.LEFT,
    ord("d"): Action.RIGHT,
}


def direction_for(key: int) -> Action | None:
    """Map an arrow or WASD key (either case) to a shift direction."""
    if key in DIRECTION_KEYS:
        return DIRECTION_KEYS[key]
    ch = keys.char_of(key)
    if ch is None:
        return None
    return DIRECTION_KEYS.get(ord(ch))


def _pressed(event: Event, ch: str) -> bool:
    return event.kind is EventKind.KEY and keys.char_of(event.value) == ch


def _effects(*kinds: EffectKind) -> tuple[Effect, ...]:
    return tuple(Effect(kind) for kind in kinds)


Handler = Callable[[Event], Optional[Transition]]


def _title_enter(event: Event) -> Transition | None:
    if event.kind is EventKind.TICK:
        return Transition(GameState.TITLE_INPUT, _effects(EffectKind.RENDER_TITLE))
    return None


def _title_input(event: Event) -> Transition | None:
    if _pressed(event, "n"):
        return Transition(GameState.DIFFICULTY_ENTER)
    if _pressed(event, "i"):
        return Transition(GameState.INSTRUCTIONS_ENTER)
    if _pressed(event, "q"):
        return Transition(GameState.TITLE_INPUT, _effects(EffectKind.QUIT))
    return None


def _instructions_enter(event: Event) -> Transition | None:
    if event.kind is EventKind.TICK:
        return Transition(GameState.INSTRUCTIONS_INPUT, _effects(EffectKind.RENDER_INSTRUCTIONS))
    return None


def _back_to_title_on_quit(event: Event) -> Transition | None:
    if _pressed(event, "q"):
        return Transition(GameState.TITLE_ENTER)
    return None


def _difficulty_enter(event: Event) -> Transition | None:
    if event.kind is EventKind.TICK:
        return Transition(GameState.DIFFICULTY_INPUT, _effects(EffectKind.RENDER_DIFFICULTY))
    return None


def _difficulty_input(event: Event) -> Transition | None:
    if event.kind is not EventKind.KEY:
        return None
    ch = keys.char_of(event.value)
    if ch not in DIFFICULTY_LEVELS:
        return None
    return Transition(
        GameState.ROUND_START,
        (Effect(EffectKind.SELECT_DIFFICULTY, DIFFICULTY_LEVELS[ch]),),
    )


def _round_start(event: Event) -> Transition | None:
    if event.kind is EventKind.TICK:
        return Transition(
            GameState.ROUND_ENTER,
            _effects(EffectKind.RESET_ROUND, EffectKind.INSERT_TILE, EffectKind.INSERT_TILE),
            immediate=True,
        )
    return None


def _round_enter(event: Event) -> Transition | None:
    if event.kind is EventKind.TICK:
        return Transition(
            GameState.ROUND_INPUT,
            _effects(EffectKind.ADVANCE_TIMER, EffectKind.RENDER_BOARD),
        )
    return None


def _round_input(event: Event) -> Transition | None:
    if event.kind is EventKind.SHIFTED:
        return Transition(GameState.SHIFTING) if event.value else None
    if event.kind is not EventKind.KEY:
        return None

    timer = Effect(EffectKind.ADVANCE_TIMER)
    action = direction_for(event.value)
    if action is not None:
        return Transition(GameState.ROUND_INPUT, (timer, Effect(EffectKind.SHIFT, int(action))))
    if _pressed(event, "q"):
        return Transition(GameState.TITLE_ENTER, (timer,))
    return Transition(GameState.ROUND_INPUT, (timer,))


def _shifting(event: Event) -> Transition | None:
    if event.kind is EventKind.TICK:
        return Transition(
            GameState.SHIFTING,
            _effects(EffectKind.ADVANCE_TIMER, EffectKind.ANIMATE),
        )
    if event.kind is EventKind.ANIMATED and not event.value:
        return Transition(GameState.SHIFT_DONE)
    return None


def _shift_done(event: Event) -> Transition | None:
    if event.kind is EventKind.TICK:
        return Transition(
            GameState.SHIFT_DONE,
            _effects(EffectKind.ADVANCE_TIMER, EffectKind.CLEAR_ANIMATIONS, EffectKind.CHECK_WIN),
        )
    if event.kind is EventKind.WIN_CHECKED:
        if event.value:
            return Transition(GameState.VICTORY)
        return Transition(
            GameState.SHIFT_DONE,
            _effects(EffectKind.INSERT_TILE, EffectKind.CHECK_LOSS),
        )
    if event.kind is EventKind.LOSS_CHECKED:
        return Transition(GameState.DEFEAT if event.value else GameState.ROUND_ENTER)
    return None


def _victory(event: Event) -> Transition | None:
    if event.kind is EventKind.TICK:
        return Transition(GameState.GAME_OVER_INPUT, _effects(EffectKind.RENDER_VICTORY))
    return None


def _defeat(event: Event) -> Transition | None:
    if event.kind is EventKind.TICK:
        return Transition(GameState.GAME_OVER_INPUT, _effects(EffectKind.RENDER_DEFEAT))
    return None


HANDLERS: dict[GameState, Handler] = {
    GameState.TITLE_ENTER: _title_enter,
    GameState.TITLE_INPUT: _title_input,
    GameState.INSTRUCTIONS_ENTER: _instructions_enter,
    GameState.INSTRUCTIONS_INPUT: _back_to_title_on_quit,
    GameState.DIFFICULTY_ENTER: _difficulty_enter,
    GameState.DIFFICULTY_INPUT: _difficulty_input,
    GameState.ROUND_START: _round_start,
    GameState.ROUND_ENTER: _round_enter,
    GameState.ROUND_INPUT: _round_input,
    GameState.SHIFTING: _shifting,
    GameState.SHIFT_DONE: _shift_done,
    GameState.VICTORY: _victory,
    GameState.DEFEAT: _defeat,
    GameState.GAME_OVER_INPUT: _back_to_title_on_quit,
}


def transition(state: GameState, event: Event) -> Transition:
    """
    Compute the next state for one event.

    Args:
        state: Current state
        event: Tick, key press, or the outcome of an earlier effect

    Returns:
        Transition with the next state and the effects to run, in order.
        Events a state does not handle leave it unchanged.
    """
    result = HANDLERS[state](event)
    if result is None:
        return Transition(state)
    return result
