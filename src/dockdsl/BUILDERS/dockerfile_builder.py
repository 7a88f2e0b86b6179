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
Builders for assembling Dockerfiles instruction by instruction.

Example::

    builder = (
        DockerfileBuilder()
        .from_("debian:stable")
        .maintainer("creichert")
        .run("apt-get -y update")
        .run("apt-get -y upgrade")
        .cmd(["echo", "hello world"])
    )
    print(builder.render())
"""
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple, Union

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
    HealthCheckDefinition,
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
from ..RENDERERS.dockerfile_renderer import render_dockerfile
from ..RENDERERS.dockerfile_writer import write_dockerfile
from ..errors import UnsupportedInstructionError


class DockerfileBuilder:
    """
    Accumulates instructions in the order they are added.

    Instructions are only ever appended; nothing is deduplicated or
    reordered, so a second FROM or CMD is kept just like the first.
    Every append method returns the builder so calls can be chained.
    """

    def __init__(self):
        self._instructions: List = []

    def __len__(self) -> int:
        return len(self._instructions)

    @property
    def instructions(self) -> Tuple:
        """A snapshot of the instructions added so far."""
        return tuple(self._instructions)

    def append(self, instruction) -> "DockerfileBuilder":
        """
        Appends an already constructed instruction model.

        :raises UnsupportedInstructionError: For a SHELL instruction.
        """
        if isinstance(instruction, ShellDirective):
            raise UnsupportedInstructionError("SHELL")
        self._instructions.append(instruction)
        return self

    def comment(self, text: str) -> "DockerfileBuilder":
        return self.append(Comment(text=text))

    def from_(self, image: str, alias: Optional[str] = None) -> "DockerfileBuilder":
        """
        Starts a build stage from a base image, optionally naming the stage.
        """
        return self.append(BaseImage(image=image, alias=alias))

    def from_as(self, image: str, alias: str) -> "DockerfileBuilder":
        return self.from_(image, alias)

    def run(self, script: str) -> "DockerfileBuilder":
        return self.append(RunCommand(script=script))

    def cmd(self, arguments: Sequence[str]) -> "DockerfileBuilder":
        return self.append(DefaultCommand(arguments=arguments))

    def label(self, pairs: Union[Mapping[str, str], Sequence[Tuple[str, str]]]) -> "DockerfileBuilder":
        return self.append(Label(pairs=pairs))

    def maintainer(self, name: str) -> "DockerfileBuilder":
        return self.append(Maintainer(name=name))

    def expose(self, port: int) -> "DockerfileBuilder":
        return self.append(ExposePort(port=port))

    def env(self, key: str, value: str) -> "DockerfileBuilder":
        return self.append(EnvVar(key=key, value=value))

    def add(self, sources: Sequence[str], destination: str, options: Sequence = ()) -> "DockerfileBuilder":
        return self.append(AddFiles(sources=sources, destination=destination, options=options))

    def add_chown(self, owners: Sequence[str], sources: Sequence[str], destination: str) -> "DockerfileBuilder":
        return self.add(sources, destination, [Chown(owners=owners)])

    def copy(self, sources: Sequence[str], destination: str, options: Sequence = ()) -> "DockerfileBuilder":
        return self.append(CopyFiles(sources=sources, destination=destination, options=options))

    def copy_from(self, stage: str, sources: Sequence[str], destination: str) -> "DockerfileBuilder":
        """
        Copies files out of an earlier build stage.
        """
        return self.copy(sources, destination, [FromStage(stage=stage)])

    def copy_chown(self, owners: Sequence[str], sources: Sequence[str], destination: str) -> "DockerfileBuilder":
        return self.copy(sources, destination, [Chown(owners=owners)])

    def entrypoint(self, executable: str, parameters: Sequence[str] = ()) -> "DockerfileBuilder":
        return self.append(Entrypoint(executable=executable, parameters=parameters))

    def volume(self, paths: Sequence[str]) -> "DockerfileBuilder":
        return self.append(Volumes(paths=paths))

    def user(self, name: str) -> "DockerfileBuilder":
        return self.append(User(name=name))

    def workdir(self, path: str) -> "DockerfileBuilder":
        return self.append(WorkingDirectory(path=path))

    def arg(self, name: str, default: Optional[str] = None) -> "DockerfileBuilder":
        return self.append(BuildArg(name=name, default=default))

    def onbuild(self, instruction) -> "DockerfileBuilder":
        """
        Appends an ONBUILD trigger. Rendering it is not supported and
        fails when the Dockerfile is rendered.
        """
        return self.append(OnBuildTrigger(instruction=instruction))

    def stopsignal(self, signal: Union[str, int]) -> "DockerfileBuilder":
        return self.append(StopSignal(signal=signal))

    def healthcheck(self, check: Optional[Tuple[Sequence[str], str]] = None) -> "DockerfileBuilder":
        """
        Appends a HEALTHCHECK.

        :param check: ``(options, command)`` to enable a check, or None for
            ``HEALTHCHECK NONE``.
        """
        if check is None:
            return self.append(HealthCheck(check=None))
        options, command = check
        return self.append(HealthCheck(check=HealthCheckDefinition(options=options, command=command)))

    def render(self) -> str:
        """
        Renders the accumulated instructions to Dockerfile text.
        """
        return render_dockerfile(self._instructions)

    def write(self, path, header: bool = True) -> str:
        """
        Renders the accumulated instructions and writes them to ``path``
        behind the generator header.
        """
        return write_dockerfile(path, self._instructions, header=header)


def _instructions_of(source: Union[DockerfileBuilder, Iterable]) -> Iterable:
    if isinstance(source, DockerfileBuilder):
        return source.instructions
    return source


def dockerfile(source: Union[DockerfileBuilder, Iterable]) -> str:
    """
    Renders a builder or a sequence of instructions to Dockerfile text.
    """
    return render_dockerfile(_instructions_of(source))


def dockerfile_write(path, source: Union[DockerfileBuilder, Iterable]) -> str:
    """
    Renders a builder or a sequence of instructions and writes it to
    ``path`` behind the generator header.
    """
    return write_dockerfile(path, _instructions_of(source))
