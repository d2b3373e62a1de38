"""
Prompts for plan generation and domain detection.
"""

import json

from journalmate.domains.schemas import Domain
from journalmate.generation.schemas import GenerationRequest
from journalmate.shared.contracts.plan_output import ActivityCategory


PLAN_SYSTEM_PROMPT = """You are JournalMate, a planning assistant that turns a short interview into an actionable plan.

You receive the planning domain and the answers the user gave. Build ONE activity with an ordered list of tasks.

## CRITICAL RULES
- Use only the information provided. Do not invent dates, prices or names the user did not give.
- Titles must be clear and specific (e.g., "Book roundtrip flights to Lisbon", not "Flights").
- Every task must be actionable and carry a realistic time estimate (e.g., "30 min", "2 hours").
- Order tasks in the sequence the user should do them.
- When money is involved, include budget-related tasks. When travel is involved, include a weather check.

## Response Format
Respond with a single JSON object and nothing else:
{{
  "activity": {{
    "title": "...",
    "category": one of {categories},
    "summary": "Brief description of the overall plan"
  }},
  "tasks": [
    {{
      "title": "...",
      "description": "...",
      "category": "same as activity or more specific",
      "priority": "high" | "medium" | "low",
      "timeEstimate": "...",
      "order": 1
    }}
  ]
}}

Task "order" values must be 1, 2, 3, ... with no gaps, matching list position."""


DETECTION_SYSTEM_PROMPT = """You are a domain classification expert. Classify the user's planning request into exactly one of these domains:
{domains}

Return high confidence (0.8-1.0) only if the request clearly matches the domain.
Respond with a JSON object: {{"domain": "<domain>", "confidence": <0-1>}}"""


def build_plan_system_prompt() -> str:
    """System prompt describing the Activity/Task JSON contract."""
    categories = " | ".join(f'"{c.value}"' for c in ActivityCategory)
    return PLAN_SYSTEM_PROMPT.format(categories=categories)


def build_plan_user_prompt(request: GenerationRequest) -> str:
    """
    User prompt carrying the collected answers.

    Args:
        request: Generation request for a ready session

    Returns:
        Prompt text with domain, mode and the answers as JSON
    """
    answers = json.dumps(request.collected_fields, indent=2, ensure_ascii=False, default=str)
    lines = [
        f"Domain: {request.domain.value}",
        f"Mode: {request.mode}",
    ]
    if request.context:
        context = json.dumps(request.context, ensure_ascii=False, default=str)
        lines.append(f"Context: {context}")
    lines.append(f"Answers:\n{answers}")
    lines.append("Create the plan now.")
    return "\n".join(lines)


def build_detection_system_prompt() -> str:
    return DETECTION_SYSTEM_PROMPT.format(
        domains="\n".join(f"- {d.value}" for d in Domain)
    )
