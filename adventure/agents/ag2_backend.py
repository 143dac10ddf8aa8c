from __future__ import annotations

from dataclasses import dataclass

from autogen import ConversableAgent

from adventure.agents.autogen_config import llm_config_from_settings
from adventure.agents.base import AgentAction
from adventure.config import AdventureSettings
from adventure.core.context import RenderedContext


def _extract_last_content(messages: object) -> str:
    """Extract the last message content from AG2 chat history."""

    if not isinstance(messages, list):
        return ""

    for msg in reversed(messages):
        if isinstance(msg, dict):
            content = msg.get("content")
            if isinstance(content, str) and content.strip():
                return content.strip()
    return ""


@dataclass(slots=True)
class Ag2ChatAgent:
    """AG2 agent wrapper using the documented `autogen` API.

    - Context building is handled by our code (RenderedContext).
    - LLM transport/config is handled by AG2 (`autogen`).

    The call blocks until the model answers; there is no timeout of our own.
    """

    name: str
    settings: AdventureSettings

    async def propose_action(self, *, ctx: RenderedContext) -> AgentAction:
        """Send the turn payload as the user message under the Game Master system prompt."""

        agent = ConversableAgent(
            name=self.name,
            system_message=ctx.system_prompt,
            llm_config=llm_config_from_settings(self.settings),
            human_input_mode="NEVER",
        )

        result = agent.run(message=ctx.user_message, max_turns=1)
        result.process()

        text = _extract_last_content(list(result.messages))
        if not text:
            # Fallback: attempt to use summary if provided.
            summary = result.summary
            if isinstance(summary, str):
                text = summary.strip()

        return AgentAction(kind="chat", content=text, metadata={"model": self.settings.model})
