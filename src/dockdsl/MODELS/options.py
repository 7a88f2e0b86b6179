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
Models for the flags accepted by the ADD and COPY instructions.
"""
from typing import Annotated, Literal, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field


class FromStage(BaseModel):
    """
    Copies from a named build stage instead of the build context.
    Rendered as ``--from=<stage>``.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["from_stage"] = "from_stage"
    stage: str


class Chown(BaseModel):
    """
    Sets ownership of the copied files.
    Rendered as one ``--chown=<owner>`` flag per owner entry.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["chown"] = "chown"
    owners: Tuple[str, ...]


CopyOption = Annotated[Union[FromStage, Chown], Field(discriminator="kind")]
