"""Effect interpreter: runs the state machine against a session and a view."""
import logging

from gazool.config import ANIM_SLOW_DOWN
from gazool.console.keys import NO_KEY
from gazool.console.model import Console
from gazool.console.view import BaseView
from gazool.fields.board import is_game_lost, is_game_won
from gazool.fields.shift import Action, shift
from gazool.machine.session import GameSession
from gazool.machine.states import INPUT_STATES, GameState
from gazool.machine.transitions import (
    TICK,
    Effect,
    EffectKind,
    Event,
    EventKind,
    key_event,
    transition,
)
from gazool.screens import art
from gazool.screens.draw import (
    draw_animation_frame,
    draw_background,
    draw_banner,
    draw_board,
    draw_title,
)

logger = logging.getLogger(__name__)


class GameMachine:
    """
    Drive a GameSession one tick at a time.

    Each call to `step` observes one input (a key in input states, a plain
    tick elsewhere), runs the resulting effects, and presents the console
    if anything was drawn. Animation pacing is a modulo on the round
    timer, not a clock: with `slow_down=n` a frame is drawn every n ticks.
    """

    def __init__(
        self,
        session: GameSession | None,
        console: Console | None,
        view: BaseView | None,
        slow_down: int = ANIM_SLOW_DOWN,
    ):
        self.session = session
        self.console = console
        self.view = view
        self.slow_down = max(1, slow_down)
        self.running = True
        self._dirty = False
        self._apply_table = {
            EffectKind.RENDER_TITLE: self._render_title,
            EffectKind.RENDER_INSTRUCTIONS: self._render_instructions,
            EffectKind.RENDER_DIFFICULTY: self._render_difficulty,
            EffectKind.RENDER_BOARD: self._render_board,
            EffectKind.RENDER_VICTORY: self._render_victory,
            EffectKind.RENDER_DEFEAT: self._render_defeat,
            EffectKind.SELECT_DIFFICULTY: self._select_difficulty,
            EffectKind.RESET_ROUND: self._reset_round,
            EffectKind.INSERT_TILE: self._insert_tile,
            EffectKind.ADVANCE_TIMER: self._advance_timer,
            EffectKind.SHIFT: self._shift,
            EffectKind.ANIMATE: self._animate,
            EffectKind.CLEAR_ANIMATIONS: self._clear_animations,
            EffectKind.CHECK_WIN: self._check_win,
            EffectKind.CHECK_LOSS: self._check_loss,
            EffectKind.QUIT: self._quit,
        }

    @property
    def state(self) -> GameState | None:
        return self.session.state if self.session is not None else None

    def step(self) -> None:
        """Run exactly one state machine step."""
        if self.session is None or not self.running:
            return

        event: Event | None = self._observe()
        while event is not None:
            current = self.session.state
            result = transition(current, event)
            if result.state is not current:
                logger.debug("%s -> %s on %s", current.name, result.state.name, event.kind.name)
            self.session.state = result.state

            event = None
            for effect in result.effects:
                outcome = self._apply_table[effect.kind](effect)
                if outcome is not None:
                    event = outcome
            if event is None and result.immediate:
                event = TICK

        if self._dirty:
            self._dirty = False
            if self.view is not None and self.console is not None:
                self.view.present(self.console)

    def run(self, max_ticks: int) -> int:
        """Step until quit or `max_ticks` steps; return the number of steps taken."""
        ticks = 0
        while self.running and ticks < max_ticks:
            self.step()
            ticks += 1
        return ticks

    def _observe(self) -> Event:
        if self.session.state in INPUT_STATES:
            key = self.view.poll_key() if self.view is not None else NO_KEY
            return key_event(key)
        return TICK

    def _drew(self) -> None:
        if self.console is not None:
            self._dirty = True

    def _render_title(self, effect: Effect) -> None:
        draw_title(self.console, self.session.score.high)
        self._drew()

    def _render_instructions(self, effect: Effect) -> None:
        draw_background(self.console, art.INSTRUCTION_SCREEN)
        self._drew()

    def _render_difficulty(self, effect: Effect) -> None:
        draw_background(self.console, art.DIFFICULTY_SCREEN)
        self._drew()

    def _render_board(self, effect: Effect) -> None:
        draw_board(self.console, self.session)
        self._drew()

    def _render_victory(self, effect: Effect) -> None:
        draw_board(self.console, self.session)
        draw_banner(self.console, art.VICTORY_BANNER)
        self._drew()

    def _render_defeat(self, effect: Effect) -> None:
        draw_board(self.console, self.session)
        draw_banner(self.console, art.DEFEAT_BANNER)
        self._drew()

    def _select_difficulty(self, effect: Effect) -> None:
        self.session.winning_tile = effect.value
        logger.info("New round, winning tile %d", effect.value)

    def _reset_round(self, effect: Effect) -> None:
        self.session.reset_round()

    def _insert_tile(self, effect: Effect) -> None:
        self.session.insert_tile()

    def _advance_timer(self, effect: Effect) -> None:
        self.session.timer += 1

    def _shift(self, effect: Effect) -> Event:
        return Event(EventKind.SHIFTED, shift(self.session, Action(effect.value)))

    def _animate(self, effect: Effect) -> Event | None:
        if self.session.timer % self.slow_down != 0:
            return None
        draw_animation_frame(self.console, self.session)
        self._drew()
        return Event(EventKind.ANIMATED, self.session.animations.step())

    def _clear_animations(self, effect: Effect) -> None:
        self.session.animations.clear()

    def _check_win(self, effect: Effect) -> Event:
        won = is_game_won(self.session.board, self.session.winning_tile)
        if won:
            logger.info("Round won with score %d", self.session.score.current)
        return Event(EventKind.WIN_CHECKED, won)

    def _check_loss(self, effect: Effect) -> Event:
        lost = is_game_lost(self.session.board)
        if lost:
            logger.info("Round lost with score %d", self.session.score.current)
        return Event(EventKind.LOSS_CHECKED, lost)

    def _quit(self, effect: Effect) -> None:
        logger.info("Quit requested")
        self.running = False
