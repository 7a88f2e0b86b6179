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
Unit tests for the YAML build description parser.
"""
import pytest
import yaml
from dockdsl.MODELS.instructions import BaseImage, CopyFiles, HealthCheck, OnBuildTrigger, StopSignal
from dockdsl.MODELS.options import FromStage
from dockdsl.PARSERS.description_parser import DescriptionParser
from dockdsl.errors import DescriptionError, UnsupportedInstructionError

DESCRIPTION = """
instructions:
  - kind: from
    image: python:${PYTHON_VERSION:-3.12}-slim
    alias: build
  - kind: run
    script: pip install --prefix=/install -r requirements.txt
  - kind: from
    image: python:${PYTHON_VERSION:-3.12}-slim
  - kind: copy
    sources: [/install]
    destination: /usr/local
    options:
      - kind: from_stage
        stage: build
  - kind: copy
    sources: ["."]
    destination: /app
    options:
      - kind: chown
        owners: ["${APP_USER}"]
  - kind: label
    pairs:
      version: "1.0"
  - kind: expose
    port: 8000
  - kind: stopsignal
    signal: 15
  - kind: healthcheck
    check:
      options: ["--interval=5m"]
      command: curl -f http://localhost:8000/
  - kind: healthcheck
  - kind: cmd
    arguments: [gunicorn, "app:app"]
"""


class TestDescriptionParser:
    """Tests for DescriptionParser."""

    def test_parse_from_string(self):
        parser = DescriptionParser(context={'APP_USER': 'app'})
        desc = parser.parse_from_string(DESCRIPTION)
        assert desc.header is True
        assert len(desc.instructions) == 11
        assert desc.instructions[0] == BaseImage(image="python:3.12-slim", alias="build")
        assert desc.instructions[3] == CopyFiles(
            sources=["/install"], destination="/usr/local", options=[FromStage(stage="build")]
        )
        assert desc.instructions[7] == StopSignal(signal=15)
        assert desc.instructions[9] == HealthCheck()

    def test_render(self):
        parser = DescriptionParser(context={'APP_USER': 'app', 'PYTHON_VERSION': '3.11'})
        text = parser.parse_from_string(DESCRIPTION).to_builder().render()
        assert text.splitlines() == [
            "FROM python:3.11-slim AS build",
            "RUN pip install --prefix=/install -r requirements.txt",
            "FROM python:3.11-slim",
            "COPY --from=build /install /usr/local",
            "COPY --chown=app . /app",
            'LABEL "version"="1.0"',
            "EXPOSE 8000",
            "STOPSIGNAL 15",
            "HEALTHCHECK --interval=5m CMD curl -f http://localhost:8000/",
            "HEALTHCHECK NONE",
            'CMD ["gunicorn","app:app"]',
        ]

    def test_parse_file_with_env_file(self, tmp_path):
        desc_file = tmp_path / "dockdsl.yml"
        desc_file.write_text(yaml.dump({
            'header': False,
            'instructions': [{'kind': 'from', 'image': '${BASE}'}],
        }))
        env_file = tmp_path / ".env"
        env_file.write_text("BASE=alpine:3.19\n")

        parser = DescriptionParser(context={'BASE': 'ignored'}, env_file=str(env_file))
        desc = parser.parse(str(desc_file))
        assert desc.header is False
        assert desc.instructions == [BaseImage(image="alpine:3.19")]

    def test_missing_env_file_is_ignored(self, tmp_path):
        parser = DescriptionParser(context={'A': '1'}, env_file=str(tmp_path / "nope.env"))
        assert parser.context == {'A': '1'}

    def test_top_level_list(self):
        desc = DescriptionParser(context={}).parse_from_string("- kind: user\n  name: nobody\n")
        assert desc.to_builder().render() == "USER nobody\n"

    def test_empty_document(self):
        desc = DescriptionParser(context={}).parse_from_string("")
        assert desc.instructions == []

    def test_nested_onbuild(self):
        content = "- kind: onbuild\n  instruction:\n    kind: run\n    script: make\n"
        desc = DescriptionParser(context={}).parse_from_string(content)
        assert isinstance(desc.instructions[0], OnBuildTrigger)

    def test_undefined_variable(self):
        with pytest.raises(DescriptionError, match="NOPE"):
            DescriptionParser(context={}).parse_from_string("- kind: user\n  name: ${NOPE}\n")

    def test_invalid_yaml(self):
        with pytest.raises(DescriptionError, match="invalid YAML"):
            DescriptionParser(context={}).parse_from_string("instructions: [unclosed", source="bad.yml")

    def test_wrong_shape(self):
        with pytest.raises(DescriptionError):
            DescriptionParser(context={}).parse_from_string("just a string")

    def test_invalid_instruction(self):
        with pytest.raises(DescriptionError, match="bad.yml"):
            DescriptionParser(context={}).parse_from_string("- kind: expose\n  port: http\n", source="bad.yml")

    def test_shell_is_unsupported(self):
        with pytest.raises(UnsupportedInstructionError):
            DescriptionParser(context={}).parse_from_string("- kind: shell\n  arguments: [/bin/bash, -c]\n")

    def test_description_error_is_value_error(self):
        with pytest.raises(ValueError):
            DescriptionParser(context={}).parse_from_string("- kind: nope\n")
