"""Render the combat gauge for an exported tracker snapshot.

Usage:
    python -m src.tracker.run_gauge <snapshot.json> [--breakdown]

Examples:
    python -m src.tracker.run_gauge data/snapshots/goblin_ambush.json
    python -m src.tracker.run_gauge goblin_ambush.json --breakdown
"""

import logging
import sys
from pathlib import Path

from src.gauge_app.hooks import UPDATE_COMBAT, HookRegistry
from src.gauge_app.session import GaugeSession
from src.logging_config import setup_logging
from src.tracker.breakdown import contribution_frame, faction_summary
from src.tracker.config import SNAPSHOT_DIR
from src.tracker.ingestion import SnapshotIngester

logger = logging.getLogger(__name__)


def run_gauge(snapshot_path: Path, breakdown: bool = False) -> str:
    """Replay one combat update from *snapshot_path* and return the output.

    Args:
        snapshot_path: JSON snapshot exported from the tracker. Bare names
            are also looked up in ``data/snapshots/``.
        breakdown: Append the per-combatant contribution table (GM only).

    Returns:
        The rendered gauge, or a short notice when it stays closed.

    Raises:
        FileNotFoundError: If the snapshot doesn't exist.
    """
    snapshot_path = Path(snapshot_path)
    if not snapshot_path.exists() and (SNAPSHOT_DIR / snapshot_path).exists():
        snapshot_path = SNAPSHOT_DIR / snapshot_path
    snapshot = SnapshotIngester(snapshot_path).read_snapshot()

    hooks = HookRegistry()
    session = GaugeSession(lambda: snapshot.combat, snapshot.user, snapshot.settings)
    session.register(hooks)
    hooks.call(UPDATE_COMBAT, snapshot.combat)

    if session.output is None:
        if not snapshot.settings.is_visible_to(snapshot.user):
            return "Combat gauge is restricted to the GM."
        return "No active combat."

    output = session.output
    if breakdown:
        if not snapshot.user.is_gm:
            logger.warning("Breakdown requested by non-GM user %s, skipping", snapshot.user.name)
        else:
            frame = contribution_frame(snapshot.combat.combatants, session.aggregator)
            summary = faction_summary(frame, session.aggregator)
            output = "\n\n".join([
                output,
                frame.to_string(index=False),
                summary.to_string(),
            ])

    return output


if __name__ == "__main__":
    setup_logging()

    args = [a for a in sys.argv[1:] if not a.startswith("--")]
    if len(args) != 1:
        print(__doc__)
        sys.exit(2)

    try:
        print(run_gauge(Path(args[0]), breakdown="--breakdown" in sys.argv[1:]))
    except Exception:
        logger.exception("Gauge rendering failed")
        sys.exit(1)
