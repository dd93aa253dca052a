"""
module askterm.terminal.backends

Contains all of the concrete TerminalBackend implementations
"""
