"""
module askterm.entrypoint

Contains the definition of the main() method that is invoked when
askterm is run directly as a module from the command line
"""

import argparse
import json
import logging
from typing import Any, Dict, List

from . import constants
from .config import AskTermConfig
from .inputline.backends.prompt_toolkit import PromptToolkitInputLine
from .prompt.abstract import BasePrompt
from .prompt.enums import PromptType
from .prompt.exceptions import UserExit
from .prompt.variants import prompt_types_by_name
from .terminal.backends.prompt_toolkit import PromptToolkitTerminal
from .utils import setup_logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=constants.APPLICATION_NAME,
        description="Ask a single question on the terminal and print the answer",
    )
    parser.add_argument(
        "type",
        choices=[prompt_type.value for prompt_type in PromptType],
        help="the kind of prompt to show",
    )
    parser.add_argument("message", help="the question to ask")
    parser.add_argument("--default", help="the answer used when none is entered")
    parser.add_argument(
        "--choice",
        action="append",
        dest="choices",
        default=None,
        help="a choice for list prompts (repeat for each choice)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="log level for the askterm log file (overrides the config)",
    )

    return parser


def _question_from_args(arguments: argparse.Namespace) -> Dict[str, Any]:
    question: Dict[str, Any] = {"message": arguments.message}

    if arguments.default is not None:
        match PromptType(arguments.type):
            case PromptType.CONFIRM:
                question["default"] = arguments.default.lower().startswith("y")
            case _:
                question["default"] = arguments.default

    if arguments.choices is not None:
        question["choices"] = arguments.choices

    return question


def main(argv: List[str] | None = None) -> int:
    """
    Asks the question described by the command line on the current terminal
    and prints the answer as JSON to stdout

    Args:
        argv (List[str] | None): The command line arguments. Defaults to sys.argv

    Returns:
        int: Exit code to return to be returned to the system

    Raises:
        Nothing
    """

    parser: argparse.ArgumentParser = _build_parser()
    arguments: argparse.Namespace = parser.parse_args(argv)

    if PromptType(arguments.type) == PromptType.RAWLIST and not arguments.choices:
        parser.error("rawlist prompts require at least one --choice")

    config: AskTermConfig = AskTermConfig.load(AskTermConfig.default_path())

    setup_logging(arguments.log_level or config.log_level)

    terminal: PromptToolkitTerminal = PromptToolkitTerminal()
    prompt: BasePrompt = prompt_types_by_name[PromptType(arguments.type)](
        _question_from_args(arguments),
        PromptToolkitInputLine(output=terminal.output),
        terminal=terminal,
        config=config,
    )

    answers: List[Any] = []
    try:
        prompt.run(answers.append)
    except UserExit as user_exit:
        logger.info("Prompt ended without an answer: %s", user_exit)
        return 1

    if len(answers) == 0:
        logger.warning("Prompt returned before its answer was delivered")
        return 1

    print(json.dumps(answers[0], default=str))
    return 0
