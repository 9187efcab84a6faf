from dataclasses import dataclass, field

from ticktask import (
    InvalidTransitionError,
    ManualTickSource,
    TaskScheduler,
    TaskStatus,
    TickTime,
    format_hms,
)
from ticktask.logging_setup import setup_logging


@dataclass
class Arena:
    """Minigame arena state mutated by scheduled tasks."""

    players: list[str] = field(default_factory=list)
    wave: int = 0
    open: bool = True


def main() -> None:
    setup_logging(level="INFO")

    source = ManualTickSource()
    scheduler = TaskScheduler(source=source)
    arena = Arena(players=["Steve", "Alex"])

    def spawn_wave() -> None:
        arena.wave += 1
        print(f"[{format_hms(source.current_tick)}] wave {arena.wave} spawned")

    def close_arena() -> None:
        arena.open = False

    waves = scheduler.run_interval(spawn_wave, delay_ticks=TickTime().add_seconds(10).ticks)
    closer = scheduler.run_timeout(close_arena, delay_ticks=TickTime().add_minutes(1).ticks)
    closer.on_complete(lambda: waves.abort()).on_complete(lambda: print("arena closed"))

    def build_scoreboard():
        for i, player in enumerate(arena.players):
            yield (i + 1) / len(arena.players)
        return {player: arena.wave for player in arena.players}

    scores = scheduler.run_job(build_scoreboard, on_progress=lambda p: print(f"scores {p:.0%}"))
    scores.on_done(lambda board: print(f"scoreboard: {board}"))

    source.advance(600)  # 30 seconds
    waves.pause()
    try:
        waves.pause()
    except InvalidTransitionError as e:
        print(f"expected: {e}")
    source.advance(200)  # no waves while paused
    waves.start()
    source.advance(600)

    print(f"waves={arena.wave} open={arena.open} waves_status={waves.status.value}")
    assert waves.status is TaskStatus.ABORTED


if __name__ == "__main__":
    main()
