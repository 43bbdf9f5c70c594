from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        "rooms_attempted": 0,
        "rooms_placed": 0,
        "rooms_rejected": 0,
        "tunnels_carved": 0,
        "monsters_placed": 0,
        "items_placed": 0,
        "placements_skipped": 0,
        "runtime_ms": 0.0,
    }
