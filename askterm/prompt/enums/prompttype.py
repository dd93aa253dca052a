from enum import StrEnum


class PromptType(StrEnum):
    CONFIRM = "confirm"
    INPUT = "input"
    RAWLIST = "rawlist"
