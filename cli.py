"""
Terminal chat client for the movie search service.
Drives a ChatController directly, without the HTTP layer.
"""
import asyncio
import sys
import webbrowser

from services.chat_controller import ChatController
from utils.http_client import HTTPClientManager


def render(conversation) -> None:
    """Print the latest assistant reply; user input is already on screen."""
    if not conversation or conversation[-1].sender != "assistant":
        return
    print(f"\nJasmin: {conversation[-1].text}")


async def run() -> None:
    controller = ChatController(navigate=webbrowser.open)
    controller.store.subscribe(render)

    print("Movie Chat")
    print("Commands: /clear (clear chat), /back (open home page), /exit")
    print("Please wait 30-50 sec for the first response...")
    print("-" * 50)

    try:
        while True:
            try:
                user_message = (await asyncio.to_thread(input, "\n> ")).rstrip("\n")
            except (EOFError, KeyboardInterrupt):
                print("\nBye!")
                return

            cmd = user_message.strip().lower()

            if cmd in {"/exit", "/quit"}:
                print("Bye!")
                return

            if cmd == "/clear":
                controller.clear()
                print("Chat cleared.")
                continue

            if cmd == "/back":
                print(f"Opening {controller.go_back()}")
                continue

            await controller.send(user_message)
    finally:
        await HTTPClientManager.close_all()


def main() -> None:
    try:
        asyncio.run(run())
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
