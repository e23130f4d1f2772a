import os

from api import state
from api.backend import TaskManagerBackend

# Configuration
ANALYSIS_LATENCY_S = float(os.getenv("ANALYSIS_LATENCY_S", "0"))


def get_backend() -> TaskManagerBackend:
    if state.backend is None:
        state.backend = state.build_backend()
    return state.backend


def get_analysis_latency() -> float:
    return ANALYSIS_LATENCY_S
