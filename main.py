# =============================================================================
# main.py  —  Entry Point for the Zoo Guide Agent
# =============================================================================
#
# HOW TO RUN:
#   1. Deploy the zoo server (python deploy.py deploy zoo-mcp-server) or run
#      it locally (python -m tools.zoo_server).
#   2. Set MCP_SERVER_URL in .env, e.g.
#        MCP_SERVER_URL=https://zoo-mcp-server-abc-ew.a.run.app/mcp/
#   3. python main.py
#
# WHAT HAPPENS:
#   1. Creates the Google ADK agent (agent/zoo_guide_agent.py), fetching an
#      ID token for the Cloud Run service if it needs one
#   2. Sets up an in-memory session
#   3. Sends each line you type to the agent
#   4. Prints the tools the agent calls, then its final reply
# =============================================================================

import asyncio
import sys

from dotenv import load_dotenv

# Load .env BEFORE creating the agent: settings, LiteLlm API keys and
# GOOGLE_APPLICATION_CREDENTIALS are all read from the environment.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.zoo_guide_agent import create_agent
from core.auth import AuthenticationError
from core.config import ConfigurationError

APP_NAME = "zoo_guide"
USER_ID = "visitor"


async def run_agent() -> None:
    """Run the zoo guide agent interactively."""

    print("=" * 70)
    print("  ZOO TOUR GUIDE AGENT")
    print("  Powered by Google ADK + a FastMCP server on Cloud Run")
    print("=" * 70)
    print("\n🔧 Initializing agent...")
    try:
        agent = create_agent()
    except (ConfigurationError, AuthenticationError) as e:
        print(f"\n❌ {e}", file=sys.stderr)
        sys.exit(1)

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(
        app_name=APP_NAME,
        user_id=USER_ID,
    )

    print("✅ Agent initialized and ready!\n")
    print("💬 Ask the guide about the animals at the zoo!")
    print("   (Type 'quit' to exit)\n")
    print("-" * 70)

    while True:
        try:
            user_input = input("\n🧑 You: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\n👋 Goodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\n👋 Goodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(
            role="user",
            parts=[types.Part(text=user_input)],
        )

        print("\n🤖 Guide is thinking...\n")
        print("-" * 70)

        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            if event.content and event.content.parts:
                for part in event.content.parts:
                    if part.text:
                        final_response = part.text

                    if part.function_call:
                        print(f"  🔧 Calling tool: {part.function_call.name}")

        print("-" * 70)
        if final_response:
            print(f"\n🤖 Guide:\n\n{final_response}")
        else:
            print("\n⚠️  No response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
