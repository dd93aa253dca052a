"""
module askterm.config.asktermconfig

Contains the definition of the AskTermConfig class, the display and logging
settings askterm reads from the user's data directory
"""

from dataclasses import dataclass
import logging
import os
from typing import Type

from dataclasses_json import dataclass_json
import platformdirs

from .. import constants

logger = logging.getLogger(__name__)


@dataclass_json
@dataclass
class AskTermConfig:
    """
    class AskTermConfig

    Display and logging settings for askterm. The colors are prompt_toolkit
    color names or hex codes (ansigreen, ansired, #ff0000) and the log level
    is a standard logging level name
    """

    version: str
    question_color: str
    error_color: str
    answer_color: str
    log_level: str

    @staticmethod
    def default_path() -> str:
        """
        Returns the location of the current user's config.json, inside the
        askterm data directory for this version

        Args:
            None

        Returns:
            str: The path of the user's config file. It may not exist yet

        Raises:
            Nothing
        """

        data_dir: str = platformdirs.user_data_dir(
            appname=constants.APPLICATION_NAME,
            version=constants.APPLICATION_VERSION,
        )
        return os.path.join(data_dir, "config.json")

    @classmethod
    def load(cls: Type["AskTermConfig"], path: str) -> "AskTermConfig":
        """
        Reads the config stored at the given path. A missing file is written
        with the default settings first. Any file that cannot be created, read
        or parsed leaves the defaults in effect

        Args:
            path (str): The config file to read

        Returns:
            AskTermConfig: The stored settings, or the defaults

        Raises:
            Nothing
        """

        try:
            if not os.path.isfile(path):
                os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
                cls.make_default().to_file(path)

            with open(path, "r", encoding="utf-8") as config_file:
                # pylint: disable=no-member
                return cls.from_json(config_file.read())
        except (AttributeError, KeyError, OSError, TypeError, ValueError) as exc:
            logger.warning("Using default settings, '%s' is unusable: %s", path, exc)
            return cls.make_default()

    @staticmethod
    def make_default() -> "AskTermConfig":
        """
        Returns the settings used when the user has not changed anything:
        green questions, red errors, cyan answers and WARNING logging
        """

        return AskTermConfig(
            version=constants.CONFIG_VERSION,
            question_color="ansigreen",
            error_color="ansired",
            answer_color="ansicyan",
            log_level="WARNING",
        )

    def to_file(self: "AskTermConfig", output_path: str) -> None:
        """
        Saves these settings as indented JSON

        Args:
            output_path (str): The file to write. It is replaced if it exists

        Returns:
            Nothing

        Raises:
            OSError: If the file cannot be written
        """

        with open(output_path, "w", encoding="utf-8") as output_file:
            # pylint: disable=no-member
            output_file.write(self.to_json(indent=2) + "\n")
