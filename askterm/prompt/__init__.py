"""
module askterm.prompt

Contains the base prompt lifecycle, its outcome types, and the prompt
variants that are built on top of it
"""
