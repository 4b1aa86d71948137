"""
Boardchat CLI - Command-line interface for the server and engines.

Usage:
    boardchat serve                  Run the API server
    boardchat tictactoe              Play tic-tac-toe in the terminal
    boardchat othello                Play othello in the terminal
    boardchat chat "<message>"       Send one chat message
"""

import argparse
import logging
import sys

from .config import SETTINGS


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Boardchat - Chat assistant with board game opponents",
        prog="boardchat",
    )
    parser.add_argument("--log-level", default=SETTINGS.log_level, help="Logging level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port")
    serve_parser.add_argument("--reload", action="store_true", help="Reload on code changes")

    # Game commands
    subparsers.add_parser("tictactoe", help="Play tic-tac-toe against the engine")
    subparsers.add_parser("othello", help="Play 6x6 othello against the engine")

    # Chat command
    chat_parser = subparsers.add_parser("chat", help="Send one chat message")
    chat_parser.add_argument("message", help="Message text")
    chat_parser.add_argument("--model", help="Model id")

    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "tictactoe":
        cmd_tictactoe(args)
    elif args.command == "othello":
        cmd_othello(args)
    elif args.command == "chat":
        cmd_chat(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_serve(args):
    """Run the API server."""
    import uvicorn

    uvicorn.run(
        "boardchat.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level.lower(),
    )


def cmd_tictactoe(args):
    """Play tic-tac-toe against the engine."""
    from .games import GameKind
    from .session import GameLoop, SessionManager

    manager = SessionManager()
    session = manager.create_session(GameKind.TICTACTOE)
    loop = GameLoop(session, opponent_delay_ms=0)

    print("You are O. Cells are numbered 0-8, left to right, top to bottom.")
    print("Each side keeps three marks; a fourth mark removes your oldest one.")
    while not session.game_state.game_over:
        print()
        print(session.game_state.render())
        raw = input("Your cell: ").strip()
        if raw in ("q", "quit"):
            manager.end_session(session.session_id, reason="user_ended")
            return
        if not raw.isdigit():
            print("Enter a number from 0 to 8.")
            continue

        result = loop.submit_human_move(cell=int(raw))
        if not result.success:
            print(f"Error: {result.error}")
            continue
        if result.opponent_pending:
            result = loop.run_opponent()
            for action in result.opponent_actions:
                print(f"Opponent: {action}")

    _print_result(session.game_state.render(), loop)
    manager.end_session(session.session_id)


def cmd_othello(args):
    """Play 6x6 othello against the engine."""
    from .games import GameKind
    from .session import GameLoop, SessionManager

    manager = SessionManager()
    session = manager.create_session(GameKind.OTHELLO)
    loop = GameLoop(session, opponent_delay_ms=0)

    print("You are Black. Enter moves as 'row col' (0-5).")
    while not session.game_state.game_over:
        print()
        print(session.game_state.render())
        raw = input("Your move: ").strip()
        if raw in ("q", "quit"):
            manager.end_session(session.session_id, reason="user_ended")
            return
        parts = raw.split()
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            print("Enter a row and a column, e.g. '1 2'.")
            continue

        result = loop.submit_human_move(row=int(parts[0]), col=int(parts[1]))
        if not result.success:
            print(f"Error: {result.error}")
            continue
        if result.opponent_pending:
            result = loop.run_opponent()
            for action in result.opponent_actions:
                print(f"Opponent: {action}")
            if not session.game_state.game_over and len(result.opponent_actions) > 1:
                print("You had no legal move and passed.")

    _print_result(session.game_state.render(), loop)
    manager.end_session(session.session_id)


def _print_result(board: str, loop):
    print()
    print(board)
    winner = loop.session.game_state.winner
    if winner is None or getattr(winner, "value", None) == "draw":
        print("Draw.")
    elif winner.value == loop.session.human_side.value:
        print("You win!")
    else:
        print("You lose.")


def cmd_chat(args):
    """Send one chat message."""
    from .chat import ChatClient

    client = ChatClient()
    result = client.reply([{"role": "user", "content": args.message}], model=args.model)
    print(result.reply)
    if result.fallback:
        sys.exit(1)


if __name__ == "__main__":
    main()
