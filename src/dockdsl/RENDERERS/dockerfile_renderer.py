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
Renderers turning instruction models into Dockerfile text.

Every instruction renders to exactly one line. A sequence renders to its
lines in order, each terminated by a newline.
"""
import json
from typing import Iterable, List, Sequence

from ..MODELS.instructions import (
    AddFiles,
    BaseImage,
    BuildArg,
    Comment,
    CopyFiles,
    DefaultCommand,
    Entrypoint,
    EnvVar,
    ExposePort,
    HealthCheck,
    Label,
    Maintainer,
    OnBuildTrigger,
    RunCommand,
    ShellDirective,
    StopSignal,
    User,
    Volumes,
    WorkingDirectory,
)
from ..MODELS.options import Chown, FromStage
from ..errors import UnsupportedInstructionError


def quote(value: str) -> str:
    """
    Renders a string as a double-quoted literal.
    """
    return json.dumps(value, ensure_ascii=False)


def quote_list(values: Iterable[str]) -> str:
    """
    Renders strings as a bracketed, comma-separated list of quoted
    literals, the exec form understood by CMD, ENTRYPOINT and VOLUME.

    >>> quote_list(["echo", "hello world"])
    '["echo","hello world"]'
    """
    return json.dumps(list(values), ensure_ascii=False, separators=(",", ":"))


def render_option(option) -> str:
    """
    Renders a single ADD/COPY option as command line flags.
    """
    if isinstance(option, FromStage):
        return f"--from={option.stage}"
    if isinstance(option, Chown):
        return " ".join(f"--chown={owner}" for owner in option.owners)
    raise TypeError(f"Not a copy option: {option!r}")


def render_options(options: Sequence) -> str:
    return " ".join(render_option(o) for o in options)


def _render_transfer(directive: str, sources: Sequence[str], destination: str, options: Sequence) -> str:
    prefix = f"{render_options(options)} " if options else ""
    return f"{directive} {prefix}{' '.join(sources)} {destination}"


def render_instruction(instruction) -> str:
    """
    Renders one instruction to one Dockerfile line.

    Args:
        instruction: Any instruction model.

    Returns:
        str: The rendered line, without a trailing newline.

    Raises:
        UnsupportedInstructionError: For ONBUILD and SHELL instructions.
        TypeError: If the object is not an instruction model.
    """
    if isinstance(instruction, Comment):
        return f"# {instruction.text}"
    elif isinstance(instruction, BaseImage):
        line = f"FROM {instruction.image}"
        if instruction.alias is not None:
            line += f" AS {instruction.alias}"
        return line
    elif isinstance(instruction, RunCommand):
        return f"RUN {instruction.script}"
    elif isinstance(instruction, DefaultCommand):
        return f"CMD {quote_list(instruction.arguments)}"
    elif isinstance(instruction, Label):
        pairs = " ".join(f"{quote(k)}={quote(v)}" for k, v in instruction.pairs)
        return f"LABEL {pairs}"
    elif isinstance(instruction, Maintainer):
        return f"MAINTAINER {instruction.name}"
    elif isinstance(instruction, ExposePort):
        return f"EXPOSE {instruction.port:d}"
    elif isinstance(instruction, EnvVar):
        return f"ENV {instruction.key} {instruction.value}"
    elif isinstance(instruction, AddFiles):
        return _render_transfer("ADD", instruction.sources, instruction.destination, instruction.options)
    elif isinstance(instruction, CopyFiles):
        return _render_transfer("COPY", instruction.sources, instruction.destination, instruction.options)
    elif isinstance(instruction, Entrypoint):
        return f"ENTRYPOINT {quote_list((instruction.executable, *instruction.parameters))}"
    elif isinstance(instruction, Volumes):
        return f"VOLUME {quote_list(instruction.paths)}"
    elif isinstance(instruction, User):
        return f"USER {instruction.name}"
    elif isinstance(instruction, WorkingDirectory):
        return f"WORKDIR {instruction.path}"
    elif isinstance(instruction, BuildArg):
        line = f"ARG {instruction.name}"
        if instruction.default is not None:
            line += f"={instruction.default}"
        return line
    elif isinstance(instruction, OnBuildTrigger):
        raise UnsupportedInstructionError("ONBUILD")
    elif isinstance(instruction, StopSignal):
        return f"STOPSIGNAL {instruction.signal}"
    elif isinstance(instruction, HealthCheck):
        if instruction.check is None:
            return "HEALTHCHECK NONE"
        return f"HEALTHCHECK {' '.join(instruction.check.options)} CMD {instruction.check.command}"
    elif isinstance(instruction, ShellDirective):
        raise UnsupportedInstructionError("SHELL")
    raise TypeError(f"Not a Dockerfile instruction: {instruction!r}")


def render_lines(instructions: Iterable) -> List[str]:
    """
    Renders every instruction, in order. Fails on the first instruction
    that cannot be rendered.
    """
    return [render_instruction(i) for i in instructions]


def render_dockerfile(instructions: Iterable) -> str:
    """
    Renders a sequence of instructions to Dockerfile text.

    Args:
        instructions: Instruction models in build order.

    Returns:
        str: One line per instruction, newline terminated. Empty input
        gives an empty string.
    """
    return "".join(f"{line}\n" for line in render_lines(instructions))
