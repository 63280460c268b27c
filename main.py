"""
Tetris Stack - Main Entry Point
Starts the interactive console game on top of the circular piece queue.
"""

from tetris_stack.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
