"""Prompt templates for the planning agent."""

from datetime import date

from vivaagent.tools.definitions import format_reference_date


SIMPLE_AGENT_INSTRUCTIONS = "You are a helpful assistant."

AGENT_INSTRUCTIONS_TEMPLATE = """\
You are a helpful assistant for Vivatech {year} conference planning. \
Current date: {current_date}.

When asked about sessions or events:
1. Use the query_vivatech_api tool to search for relevant information
2. Format the results in a clear, organized way for the user
3. If sessions have dates, use the assess_event_timeliness tool and note which ones are happening soon"""


def build_agent_instructions(reference_date: date) -> str:
    return AGENT_INSTRUCTIONS_TEMPLATE.format(
        year=reference_date.year,
        current_date=format_reference_date(reference_date),
    )
