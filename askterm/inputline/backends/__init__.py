"""
module askterm.inputline.backends

Contains all of the concrete InputLine implementations
"""
