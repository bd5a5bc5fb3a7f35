#!/usr/bin/env python3
"""
Demo: Solving a Scrambled Board by Replaying the Scramble

This demonstration plays one headless round:

1. Generate the default level (5x5, cross pattern, 12 scramble moves)
2. Scramble the solved grid with a seeded random source
3. Play by clicking every scramble pick again (order reversed)
4. XOR toggles cancel, so the board returns to solved: the round is won
5. Record the score on a JSON-backed leaderboard

Output: output/demo_play/round.png, output/demo_play/scores.json
"""

import numpy as np
import matplotlib.pyplot as plt

from switchgrid.core import PhaseStateMachine, GamePhase, lookup, replay
from switchgrid.scoring import ScoreBoard, JsonFileStore, ManualClock, format_time
from switchgrid.viz import plot_board, plot_toggle_mask, plot_scores, save_figure


def main():
    print("=" * 60)
    print("  SWITCHGRID ROUND DEMONSTRATION")
    print("=" * 60)

    clock = ManualClock()
    board = ScoreBoard(store=JsonFileStore("output/demo_play/scores.json"))
    machine = PhaseStateMachine(
        recorder=board,
        clock=clock,
        rng=np.random.default_rng(seed=7),
    )

    print("\n1. Starting round...")
    machine.start()
    level = machine.level
    print(f"   Level: {level.name}, {level.size}x{level.size}, {level.scramble_moves} scramble moves")
    print(f"   Scramble picks: {list(machine.picks)}")
    print(f"   Lit cells after scramble: {machine.grid.lit_count}")
    print("\n" + str(machine.grid))

    pattern = lookup(level.pattern)
    replayed = replay(machine.initial_grid, machine.picks, pattern)
    print(f"   Lit cells after replaying the picks: {replayed.lit_count} (expect 0)")

    print("\n2. Playing the picks back in reverse...")
    clicks = []
    for row, col in reversed(machine.picks):
        if machine.phase is not GamePhase.PLAYING:
            break
        clock.tick(7)  # ~0.7 s of thinking per click
        machine.cell_click(row, col)
        clicks.append((row, col))
    print(f"   Phase: {machine.phase.value}")
    print(f"   Moves: {machine.moves}, time: {format_time(machine.elapsed)}")

    # Figure: scrambled board, one click mask, final board, leaderboard
    fig, axes = plt.subplots(1, 4, figsize=(20, 5))
    plot_board(machine.initial_grid, title="Scrambled", ax=axes[0], clicks=machine.picks)
    first_row, first_col = machine.picks[-1] if machine.picks else (level.size // 2, level.size // 2)
    plot_toggle_mask(pattern, level.size, first_row, first_col, ax=axes[1])
    plot_board(machine.grid, title=f"After {machine.moves} moves", ax=axes[2])
    plot_scores(board.list(), ax=axes[3])
    fig.suptitle("One Round of switchgrid", fontsize=14, fontweight="bold")
    fig.tight_layout()

    save_figure(fig, "output/demo_play/round.png")
    plt.close(fig)
    print("\n   Saved: output/demo_play/round.png")

    print("\n3. Leaderboard:")
    for i, score in enumerate(board.list(), start=1):
        print(f"   {i:2d}. {score.moves:3d} moves  {format_time(score.time)}  {score.date}")

    print("\n" + "=" * 60)
    print("  Round complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
