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
dockdsl - Dockerfile DSL

Describe container image builds in Python and render them to the exact
Dockerfile text consumed by the build engine. Compatible with Docker 18.03.

    >>> from dockdsl import DockerfileBuilder
    >>> print(DockerfileBuilder().from_("debian:stable").cmd(["echo", "hi"]).render(), end="")
    FROM debian:stable
    CMD ["echo","hi"]
"""

__version__ = "0.1.0"
__author__ = "Michael Maillet, Damien Davison, Sacha Davison"
__license__ = "Apache-2.0"

from .errors import DescriptionError, DockdslError, UnsupportedInstructionError
from .MODELS.options import Chown, CopyOption, FromStage
from .MODELS.instructions import (
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
    Instruction,
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
from .MODELS.description import DockerfileDescription
from .RENDERERS.dockerfile_renderer import render_dockerfile, render_instruction
from .RENDERERS.dockerfile_writer import GENERATOR_HEADER, write_dockerfile
from .BUILDERS.dockerfile_builder import DockerfileBuilder, dockerfile, dockerfile_write
from .PARSERS.description_parser import DescriptionParser
