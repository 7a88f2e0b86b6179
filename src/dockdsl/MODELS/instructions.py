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
Models for the instructions of a Dockerfile.

Each model is one directive of the build file format. Models only check
the shape of their fields; the content (image names, ports, signal names)
is passed through to the rendered file untouched.
"""
from typing import Annotated, Any, Literal, Mapping, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .options import CopyOption
from ..errors import UnsupportedInstructionError


class BaseInstruction(BaseModel):
    """
    Common configuration for all instruction models.
    Instructions are immutable once created. Numbers given for string
    fields (``ARG VERSION=1``) are kept as their text.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", coerce_numbers_to_str=True)


class Comment(BaseInstruction):
    """
    A comment line. ``# `` is prepended when rendered.
    """
    kind: Literal["comment"] = "comment"
    text: str


class BaseImage(BaseInstruction):
    """
    The FROM instruction, starting a new build stage with an optional
    stage alias.
    """
    kind: Literal["from"] = "from"
    image: str
    alias: Optional[str] = None


class RunCommand(BaseInstruction):
    """
    The RUN instruction in shell form. The script is rendered verbatim.
    """
    kind: Literal["run"] = "run"
    script: str


class DefaultCommand(BaseInstruction):
    """
    The CMD instruction in exec form.
    """
    kind: Literal["cmd"] = "cmd"
    arguments: Tuple[str, ...]


class Label(BaseInstruction):
    """
    The LABEL instruction. Pairs keep the order they were given in.
    """
    kind: Literal["label"] = "label"
    pairs: Tuple[Tuple[str, str], ...]

    @field_validator("pairs", mode="before")
    @classmethod
    def _mapping_to_pairs(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return list(value.items())
        return value


class Maintainer(BaseInstruction):
    kind: Literal["maintainer"] = "maintainer"
    name: str


class ExposePort(BaseInstruction):
    kind: Literal["expose"] = "expose"
    port: int


class EnvVar(BaseInstruction):
    kind: Literal["env"] = "env"
    key: str
    value: str


class AddFiles(BaseInstruction):
    """
    The ADD instruction. Options are rendered before the paths.
    """
    kind: Literal["add"] = "add"
    sources: Tuple[str, ...]
    destination: str
    options: Tuple[CopyOption, ...] = ()


class CopyFiles(BaseInstruction):
    """
    The COPY instruction. Options are rendered before the paths.
    """
    kind: Literal["copy"] = "copy"
    sources: Tuple[str, ...]
    destination: str
    options: Tuple[CopyOption, ...] = ()


class Entrypoint(BaseInstruction):
    """
    The ENTRYPOINT instruction in exec form: the executable followed by
    its parameters.
    """
    kind: Literal["entrypoint"] = "entrypoint"
    executable: str
    parameters: Tuple[str, ...] = ()


class Volumes(BaseInstruction):
    kind: Literal["volume"] = "volume"
    paths: Tuple[str, ...]


class User(BaseInstruction):
    kind: Literal["user"] = "user"
    name: str


class WorkingDirectory(BaseInstruction):
    kind: Literal["workdir"] = "workdir"
    path: str


class BuildArg(BaseInstruction):
    """
    The ARG instruction with an optional default value.
    """
    kind: Literal["arg"] = "arg"
    name: str
    default: Optional[str] = None


class OnBuildTrigger(BaseInstruction):
    """
    The ONBUILD instruction, wrapping an instruction to be replayed by a
    downstream build. It can be created but rendering it always fails.
    """
    kind: Literal["onbuild"] = "onbuild"
    instruction: "Instruction"


class StopSignal(BaseInstruction):
    """
    The STOPSIGNAL instruction. Accepts a signal name (``SIGKILL``) or
    a number (``9``).
    """
    kind: Literal["stopsignal"] = "stopsignal"
    signal: Union[str, int]


class HealthCheckDefinition(BaseModel):
    """
    The options and command of an enabled health check.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    options: Tuple[str, ...] = ()
    command: str


class HealthCheck(BaseInstruction):
    """
    The HEALTHCHECK instruction. A missing check renders
    ``HEALTHCHECK NONE``, disabling any inherited health check.
    """
    kind: Literal["healthcheck"] = "healthcheck"
    check: Optional[HealthCheckDefinition] = None


class ShellDirective(BaseInstruction):
    """
    The SHELL instruction. It is part of the instruction set so that
    every directive has a model, but it is not supported: validating
    construction fails immediately.
    """
    kind: Literal["shell"] = "shell"
    arguments: Tuple[str, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _reject(cls, data: Any) -> Any:
        raise UnsupportedInstructionError("SHELL")


Instruction = Annotated[
    Union[
        Comment,
        BaseImage,
        RunCommand,
        DefaultCommand,
        Label,
        Maintainer,
        ExposePort,
        EnvVar,
        AddFiles,
        CopyFiles,
        Entrypoint,
        Volumes,
        User,
        WorkingDirectory,
        BuildArg,
        OnBuildTrigger,
        StopSignal,
        HealthCheck,
        ShellDirective,
    ],
    Field(discriminator="kind"),
]

INSTRUCTION_TYPES = (
    Comment,
    BaseImage,
    RunCommand,
    DefaultCommand,
    Label,
    Maintainer,
    ExposePort,
    EnvVar,
    AddFiles,
    CopyFiles,
    Entrypoint,
    Volumes,
    User,
    WorkingDirectory,
    BuildArg,
    OnBuildTrigger,
    StopSignal,
    HealthCheck,
    ShellDirective,
)

OnBuildTrigger.model_rebuild()
