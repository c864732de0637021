"""
FastAPI endpoint for plan generation.

POST /generate-plan runs the planning graph for an objective and returns
the plan as plain text. Failures are returned as "Error: ..." text with
status 200, matching the existing client contract.
"""

import logging
import uuid
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from vivaagent.graph.build import create_initial_state, create_planning_graph
from vivaagent.graph.config import PlanningGraphConfig, get_config
from vivaagent.graph.prompts import SIMPLE_AGENT_INSTRUCTIONS
from vivaagent.shared.config.settings import AppSettings
from vivaagent.shared.llm.client import ChatModel, get_cached_client


logger = logging.getLogger(__name__)

router = APIRouter(tags=["planning"])

SIMPLE_MODE_TRIGGER = "test simple"


class GeneratePlanRequest(BaseModel):
    """Request to generate an action plan."""

    objective: str = Field(description="Free-text planning objective")


def initialize_chat_model(settings: AppSettings, config: PlanningGraphConfig) -> ChatModel:
    """Create the chat model used by the planning agent."""
    client = get_cached_client(settings.openai_api_key)
    return ChatModel(
        client=client,
        model=config.model,
        temperature=config.temperature,
        max_tokens=config.max_tokens,
    )


async def run_simple_agent(chat_model: Any, objective: str) -> str:
    """Answer the objective with a plain assistant and no tools."""
    message = await chat_model.complete(
        [
            {"role": "system", "content": SIMPLE_AGENT_INSTRUCTIONS},
            {"role": "user", "content": objective},
        ]
    )
    return message.get("content") or ""


@router.post("/generate-plan", response_class=PlainTextResponse)
async def generate_plan(payload: GeneratePlanRequest, request: Request) -> str:
    """
    Generate an action plan for a Vivatech attendee.

    Builds the planning graph with the configured tools and returns the
    final assistant message.
    """
    session_id = str(uuid.uuid4())
    _log = f"[session={session_id}] [graph=planning] [api=generate_plan] "
    logger.info(f"{_log}Received planning request for objective: {payload.objective}")

    state = request.app.state
    settings: AppSettings = state.settings
    config = get_config(model=settings.model)

    try:
        chat_model = getattr(state, "chat_model", None) or initialize_chat_model(settings, config)
    except Exception as e:
        logger.error(f"{_log}Failed to initialize OpenAI client: {e}")
        return f"Error: Failed to initialize AI service - {e}"

    if SIMPLE_MODE_TRIGGER in payload.objective:
        logger.info(f"{_log}Running simple agent test without tools")
        try:
            response = await run_simple_agent(chat_model, payload.objective)
        except Exception as e:
            logger.error(f"{_log}Simple agent failed: {e}")
            return f"Error: Simple agent failed - {e}"
        logger.info(f"{_log}Simple agent response successful")
        return response

    graph = create_planning_graph(chat_model, state.tool_adapter)
    initial_state = create_initial_state(
        payload.objective,
        settings.reference_date,
        session_id=session_id,
        config=config,
    )

    logger.info(f"{_log}Invoking planning graph | entry=agent")
    try:
        final_state = await graph.ainvoke(
            initial_state, config={"recursion_limit": config.recursion_limit}
        )
    except Exception as e:
        logger.exception(f"{_log}Agent execution failed: {e}")
        return f"Error: Failed to generate plan - {e}"

    errors = final_state.get("errors", [])
    if errors:
        logger.error(f"{_log}Agent execution failed: {errors[0]}")
        return f"Error: Failed to generate plan - {errors[0]}"

    plan = final_state.get("plan") or ""
    logger.info(
        f"{_log}Planning task completed | rounds={final_state.get('tool_rounds', 0)}, "
        f"response length: {len(plan)} chars"
    )
    return plan
