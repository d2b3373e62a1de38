"""
JournalMate planning core.

Packages:
- domains: Domain question registry
- slot_filling: Planning sessions, answer parsing, turn graph and API
- generation: Plan-generation hand-off and domain detection
- shared: LLM client, logging, output contracts and errors
"""
