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
Writing rendered Dockerfiles to disk.
"""
import logging
import os
from typing import Iterable, Union
from jinja2 import Template

from .dockerfile_renderer import render_lines

logger = logging.getLogger(__name__)

GENERATOR_HEADER = "# this file was generated by the `dockdsl` python library"

DOCKERFILE_TEMPLATE = """\
{% if header %}{{ header }}

{% endif %}{% for line in lines %}{{ line }}
{% endfor %}"""

_template = Template(DOCKERFILE_TEMPLATE, keep_trailing_newline=True)


def render_file_content(instructions: Iterable, header: bool = True) -> str:
    """
    Renders the full content of a generated Dockerfile.

    :param instructions: Instruction models in build order.
    :param header: Whether to prepend the generator comment and a blank line.
    :return: The file content.
    """
    lines = render_lines(instructions)
    return _template.render(header=GENERATOR_HEADER if header else None, lines=lines)


def write_dockerfile(
    path: Union[str, "os.PathLike[str]"],
    instructions: Iterable,
    header: bool = True,
) -> str:
    """
    Renders instructions and writes them to a file, replacing its content.

    The content is rendered before the file is opened, so an instruction
    that cannot be rendered leaves an existing file untouched.

    :param path: Target file path. Its directory must already exist.
    :param instructions: Instruction models in build order.
    :param header: Whether to prepend the generator comment.
    :return: The written content.
    :raises UnsupportedInstructionError: If an instruction cannot be rendered.
    :raises OSError: If the file cannot be written.
    """
    content = render_file_content(instructions, header=header)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    logger.debug("Wrote %d bytes to %s", len(content.encode("utf-8")), os.fspath(path))
    return content
