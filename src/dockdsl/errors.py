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
Exceptions raised by dockdsl.
"""


class DockdslError(Exception):
    """
    Base class for all dockdsl errors.
    """


class UnsupportedInstructionError(DockdslError, NotImplementedError):
    """
    Raised when an instruction that dockdsl cannot render is constructed
    or rendered. This is always fatal for the current render.
    """

    def __init__(self, directive: str):
        self.directive = directive
        super().__init__(f"{directive} instruction is not currently supported")


class DescriptionError(DockdslError, ValueError):
    """
    Raised when a YAML build description cannot be loaded.
    """

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")
