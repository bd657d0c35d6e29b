"""
Main entry point for the event planning assistant.
"""

import logging
import uuid
from datetime import datetime
from typing import List

from .config.settings import validate_api_keys
from .core.agent import EventPlanningAgent
from .core.models import AgentResponse, ChatRequest, ConversationTurn


def display_response(response: AgentResponse) -> None:
    """Prints the reply, suggestions and schedule in a user-friendly format."""
    print(f"\nPlanner: {response.message}")

    if response.suggestions:
        print("\n--- Suggested Places ---")
        for place in response.suggestions:
            rating = f" ({place.rating}★)" if place.rating is not None else ""
            print(f"- {place.name}{rating}")
            if place.address:
                print(f"    Loc: {place.address}")

    if response.schedule:
        print("\n--- Schedule ---")
        for slot in response.schedule:
            start = slot.start_time.strftime("%a %H:%M")
            end = slot.end_time.strftime("%H:%M")
            print(f"- {start}-{end} {slot.title} [{slot.category.value}]")


def main():
    """Main entry point for the event planning assistant."""
    print("--- Event Planner: plan your next get-together ---")
    print("Tell me what you have in mind, e.g. 'Plan a birthday party in downtown for 10 people'.")
    print("Type 'exit' or 'quit' to leave.")

    if not validate_api_keys():
        print("\nError: Missing required configuration. Please set the following environment variables:")
        print("- COMPLETION_BASE_URL")
        print("- COMPLETION_API_KEY")
        return

    agent = EventPlanningAgent()
    event_id = uuid.uuid4().hex
    history: List[ConversationTurn] = []

    while True:
        try:
            user_input = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye!")
            break
        if user_input.lower() in ["exit", "quit"]:
            print("Goodbye!")
            break
        if not user_input:
            continue

        print("Planning...")
        response = agent.process_chat(ChatRequest(
            message=user_input,
            event_id=event_id,
            previous_messages=tuple(history),
        ))
        display_response(response)

        history.append(ConversationTurn(role="user", content=user_input, timestamp=datetime.now()))
        history.append(ConversationTurn(role="assistant", content=response.message, timestamp=datetime.now()))
        logging.debug(f"Session holds {len(history)} turns.")


if __name__ == "__main__":
    main()
