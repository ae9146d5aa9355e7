# packview_app/lib/run_state.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List

from packview_app.lib.log import get_logger
from packview_app.lib.probes import ProbeResult, ProbeRunner, all_success, has_errors

log = get_logger("run_state")


class RunPhase(str, Enum):
    NOT_STARTED = "not_started"
    LOADING = "loading"
    SETTLED = "settled"


class InvalidRunTransition(RuntimeError):
    pass


@dataclass
class ProbeRunState:
    """What the page renders: the last settled results and a loading flag."""

    results: List[ProbeResult] = field(default_factory=list)
    loading: bool = False
    phase: RunPhase = RunPhase.NOT_STARTED

    def begin(self) -> bool:
        """
        Start a run: drop old results and flag loading.
        Returns False (and changes nothing) if a run is already in flight.
        """
        if self.loading:
            log.info("run already in flight; trigger ignored")
            return False
        self.results = []
        self.loading = True
        self.phase = RunPhase.LOADING
        return True

    def settle(self, results: Iterable[ProbeResult]) -> None:
        if self.phase is not RunPhase.LOADING:
            raise InvalidRunTransition(f"cannot settle from {self.phase.value}")
        self.results = list(results)
        self.loading = False
        self.phase = RunPhase.SETTLED

    @property
    def all_success(self) -> bool:
        return all_success(self.results)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.results)


async def settle_run(state: ProbeRunState, runner: ProbeRunner) -> None:
    """Finish a run already started with ``begin()``."""
    if not state.loading:
        raise InvalidRunTransition(f"no run in flight ({state.phase.value})")
    state.settle(await runner.run())


async def run_probes(state: ProbeRunState, runner: ProbeRunner) -> bool:
    """Drive one full run into ``state``. False if the trigger was ignored."""
    if not state.begin():
        return False
    await settle_run(state, runner)
    return True
