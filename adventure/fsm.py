from __future__ import annotations

import logging

from statemachine import State, StateMachine

from adventure.models import Session, SessionPhase, TurnStatus

logger = logging.getLogger(__name__)


class SessionClosedError(RuntimeError):
    pass


class SessionFSM(StateMachine):
    """FSM wrapper around a Session.

    - phases: active -> game_over | exited
    - deltas are applied by the turn loop; the FSM only guards transitions.
    """

    active = State(SessionPhase.active.value, value=SessionPhase.active.value, initial=True)
    game_over = State(SessionPhase.game_over.value, value=SessionPhase.game_over.value, final=True)
    exited = State(SessionPhase.exited.value, value=SessionPhase.exited.value, final=True)

    health_depleted = active.to(game_over)
    exit_requested = active.to(exited)

    def __init__(self, session: Session):
        self.session = session
        super().__init__(start_value=session.phase.value)

    def on_enter_state(self, target: State) -> None:
        logger.debug("Session entered %s", target.id)
        self.sync_phase_to_model()

    def sync_phase_to_model(self) -> None:
        self.session.phase = SessionPhase(str(self.current_state.value))

    @property
    def in_play(self) -> bool:
        return self.session.phase == SessionPhase.active

    def record_turn(self, status: TurnStatus) -> None:
        if status == TurnStatus.GAME_OVER:
            self.health_depleted()

    def require_active(self) -> None:
        if not self.in_play:
            raise SessionClosedError(f"Session is over (phase '{self.session.phase.value}')")
