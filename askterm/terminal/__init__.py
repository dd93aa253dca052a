"""
module askterm.terminal

Contains the TerminalBackend abstract base class and its implementations,
which move the cursor, erase lines, and color output on behalf of prompts
"""
