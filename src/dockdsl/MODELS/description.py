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
Model for a build description loaded from a YAML document.
"""
from typing import List
from pydantic import BaseModel, ConfigDict

from .instructions import Instruction


class DockerfileDescription(BaseModel):
    """
    A complete build description: the ordered instructions and whether
    the generator header is written with them.
    """
    model_config = ConfigDict(extra="forbid")

    header: bool = True
    instructions: List[Instruction] = []

    def to_builder(self):
        """
        Creates a builder holding the instructions of this description.

        :return: A DockerfileBuilder in instruction order.
        """
        from ..BUILDERS.dockerfile_builder import DockerfileBuilder

        builder = DockerfileBuilder()
        for instruction in self.instructions:
            builder.append(instruction)
        return builder
