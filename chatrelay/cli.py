"""Terminal front-end for the chat relay.

Type a message and press enter. ``/new`` starts a new chat, ``/quit`` exits.
"""

import argparse
import asyncio
import sys

import chatrelay.config.config as configs
from chatrelay.client.relay.relay_client import RelayClient
from chatrelay.ui.conversation_store import ConversationStore

NEW_CHAT_COMMAND = "/new"
QUIT_COMMAND = "/quit"


def _print_last_reply(store: ConversationStore) -> None:
    last = store.turns[-1]
    if last.role == "assistant":
        print(f"🤖 {last.content}\n")


async def chat_loop(store: ConversationStore, read_line=None) -> None:
    read_line = read_line or (lambda: input("👤 "))
    _print_last_reply(store)

    while True:
        try:
            line = await asyncio.to_thread(read_line)
        except EOFError:
            break

        command = line.strip()
        if command == QUIT_COMMAND:
            break
        if command == NEW_CHAT_COMMAND:
            store.reset()
            _print_last_reply(store)
            continue

        if await store.submit(line):
            _print_last_reply(store)
        elif store.error:
            print(store.error, file=sys.stderr)
            store.dismiss_error()


async def _main(api_url: str) -> None:
    relay = RelayClient(api_url)
    try:
        await chat_loop(ConversationStore(relay.send))
    finally:
        await relay.aclose()


def run() -> None:
    parser = argparse.ArgumentParser(description="Chat with the relay from the terminal.")
    parser.add_argument("--api-url", default=configs.CHAT_API_URL, help="Base URL of the relay server")
    args = parser.parse_args()

    try:
        asyncio.run(_main(args.api_url))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
