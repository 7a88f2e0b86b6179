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
Parser for .env files supplying variables to build descriptions.
"""
import re
from typing import Dict

_EXPORT_PREFIX = re.compile(r'^export\s+')


class EnvParser:
    """
    Parser for .env files.
    """
    @staticmethod
    def parse(env_path: str) -> Dict[str, str]:
        """
        Parses an .env file from a path.

        Args:
            env_path (str): Path to the .env file.

        Returns:
            Dict[str, str]: Variables in the order they appear.
        """
        with open(env_path, 'r', encoding='utf-8') as f:
            content = f.read()
        return EnvParser.parse_from_string(content)

    @staticmethod
    def parse_from_string(content: str) -> Dict[str, str]:
        """
        Parses variables from a string.
        Handles quotes, comments and a leading ``export``.
        """
        env = {}
        for line in content.splitlines():
            line = line.strip()
            if not line or line.startswith('#') or '=' not in line:
                continue

            key, value = line.split('=', 1)
            key = _EXPORT_PREFIX.sub('', key.strip()).strip()
            value = value.strip()
            if not key:
                continue

            if value[:1] in ('"', "'"):
                quote = value[0]
                end = value.find(quote, 1)
                while end != -1 and value[end - 1] == '\\':
                    end = value.find(quote, end + 1)
                if end != -1:
                    value = value[1:end].replace(f'\\{quote}', quote)
            elif '#' in value:
                value = value.split('#', 1)[0].strip()

            env[key] = value

        return env
