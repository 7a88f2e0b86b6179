# Copyright 2024 Michael Maillet, Damien Davison, Sacha Davison
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Parser for YAML build descriptions.
"""
import logging
import os
from typing import Dict, Optional
import yaml
from pydantic import ValidationError

from ..MODELS.description import DockerfileDescription
from ..UTILS.string_interpolation import EnvironmentInterpolator
from ..errors import DescriptionError
from .env_parser import EnvParser

logger = logging.getLogger(__name__)


class DescriptionParser:
    """
    Parser for YAML build descriptions (``dockdsl.yml``).
    """
    def __init__(self, context: Optional[Dict[str, str]] = None, env_file: Optional[str] = None):
        """
        Initializes the parser with the variables used for interpolation.

        :param context: Variables for interpolation. Defaults to the process environment.
        :param env_file: Optional .env file whose variables override the context.
        """
        self.context = dict(os.environ) if context is None else dict(context)
        if env_file:
            if os.path.exists(env_file):
                self.context.update(EnvParser.parse(env_file))
            else:
                logger.warning("Env file %s not found, ignoring it", env_file)

    def parse(self, description_path: str) -> DockerfileDescription:
        """
        Parses a build description from a path.

        :param description_path: Path to the YAML document.
        :return: Parsed description.
        """
        with open(description_path, 'r', encoding='utf-8') as f:
            content = f.read()
        return self.parse_from_string(content, source=description_path)

    def parse_from_string(self, content: str, source: str = "<string>") -> DockerfileDescription:
        """
        Parses a build description from a string.

        :param content: YAML content of the description.
        :param source: Name of the document, used in error messages.
        :return: Parsed description.
        :raises DescriptionError: If the document cannot be loaded.
        :raises UnsupportedInstructionError: If it contains a SHELL instruction.
        """
        try:
            content = EnvironmentInterpolator.interpolate(content, self.context)
        except KeyError as e:
            raise DescriptionError(source, e.args[0]) from e

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise DescriptionError(source, f"invalid YAML: {e}") from e

        if data is None:
            data = {}
        elif isinstance(data, list):
            data = {'instructions': data}
        elif not isinstance(data, dict):
            raise DescriptionError(source, "expected a mapping or a list of instructions")

        try:
            description = DockerfileDescription.model_validate(data)
        except ValidationError as e:
            raise DescriptionError(source, str(e)) from e

        logger.debug("Loaded %d instructions from %s", len(description.instructions), source)
        return description
