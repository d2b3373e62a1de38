"""Graph construction and configuration for the slot-filling turn."""

from journalmate.slot_filling.graph.build import create_slot_filling_graph
from journalmate.slot_filling.graph.config import (
    DEFAULT_CONFIG,
    SlotFillingConfig,
    get_config,
)

__all__ = [
    "create_slot_filling_graph",
    "SlotFillingConfig",
    "DEFAULT_CONFIG",
    "get_config",
]
