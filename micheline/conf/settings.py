# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from pathlib import Path
from typing import Optional, Union

from pydantic import field_validator

from micheline.utils import pydantic

DEFAULT_MAX_NESTING_DEPTH = 100

# Every nesting level costs a few interpreter frames, so the depth is capped well below the default recursion limit.
MAX_NESTING_DEPTH_LIMIT = 200


class CodecSettings(pydantic.BaseModel):
    # Maximum number of levels below the root node. Deeper trees are rejected both when encoding and when decoding.
    MAX_NESTING_DEPTH: int = DEFAULT_MAX_NESTING_DEPTH

    # Maximum size of an encoded tree in bytes, `None` disables the limit.
    MAX_ENCODED_BYTES: Optional[int] = None

    # Whether `MichelineCodec.decode` accepts bytes after the root node, they are ignored when it does.
    ALLOW_TRAILING_DATA: bool = False

    @field_validator('MAX_NESTING_DEPTH')
    @classmethod
    def _validate_max_nesting_depth(cls, max_nesting_depth: int) -> int:
        if not 0 < max_nesting_depth <= MAX_NESTING_DEPTH_LIMIT:
            raise ValueError(
                f'MAX_NESTING_DEPTH must be between 1 and {MAX_NESTING_DEPTH_LIMIT}, got {max_nesting_depth}'
            )
        return max_nesting_depth

    @field_validator('MAX_ENCODED_BYTES')
    @classmethod
    def _validate_max_encoded_bytes(cls, max_encoded_bytes: Optional[int]) -> Optional[int]:
        if max_encoded_bytes is not None and max_encoded_bytes <= 0:
            raise ValueError(f'MAX_ENCODED_BYTES must be positive, got {max_encoded_bytes}')
        return max_encoded_bytes

    @classmethod
    def from_yaml(cls, *, filepath: Union[Path, str]) -> 'CodecSettings':
        """Takes a filepath to a yaml file and returns a validated CodecSettings instance."""
        from micheline.utils.yaml import dict_from_extended_yaml
        settings_dict = dict_from_extended_yaml(filepath=filepath)
        return cls.model_validate(settings_dict)
