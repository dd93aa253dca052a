"""
module askterm.inputline

Contains the InputLine abstract base class and its implementations, which
read the lines that the user submits to a prompt
"""
