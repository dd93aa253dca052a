"""
module askterm.prompt.variants

Contains the concrete prompt variants built on BasePrompt and a mapping
from PromptType to the class implementing it
"""

from typing import Dict, Type

from ..abstract import BasePrompt
from ..enums import PromptType
from .confirmprompt import ConfirmPrompt
from .inputprompt import InputPrompt
from .rawlistprompt import RawListPrompt

prompt_types_by_name: Dict[PromptType, Type[BasePrompt]] = {
    PromptType.CONFIRM: ConfirmPrompt,
    PromptType.INPUT: InputPrompt,
    PromptType.RAWLIST: RawListPrompt,
}
