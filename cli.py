# Role: Local developer CLI to chat with a ConversationController without the web UI.
# Useful for trying both branches and seeing debug logs in the terminal.

from __future__ import annotations

import pixelseeker.config
pixelseeker.config.load_env()

from pixelseeker.core.conversation_controller import ConversationController
from pixelseeker.errors import ConversationBusyError
from pixelseeker.models.message import Message


def _print_message(msg: Message) -> None:
    who = "PixelSeeker" if msg.is_from_assistant else "You"
    print(f"\n{who}: {msg.text}")


def main() -> None:
    # 1) Create a controller (seeded with the welcome message)
    # 2) Route user input -> controller -> print the new assistant message
    print("PixelSeeker CLI")
    print("Commands: /new (new conversation), /history (show transcript), /exit")
    print("-" * 50)

    controller = ConversationController()
    _print_message(controller.transcript[0])

    while True:
        try:
            user_message = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_message:
            continue

        cmd = user_message.lower()

        if cmd in {"/exit", "exit", "quit", "/quit"}:
            print("Bye!")
            return

        if cmd in {"/new", "new"}:
            controller = ConversationController()
            _print_message(controller.transcript[0])
            continue

        if cmd in {"/history", "history"}:
            for msg in controller.transcript:
                _print_message(msg)
            continue

        print("PixelSeeker is typing...")
        try:
            reply = controller.submit_user_message(user_message)
        except ConversationBusyError:
            print("Still working on your previous message.")
            continue
        _print_message(reply)


if __name__ == "__main__":
    main()
