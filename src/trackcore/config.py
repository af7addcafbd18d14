########## LICENCE ##########
# trackcore
# Copyright (C) 2024 Genome Research Ltd
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as
# published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#############################

from __future__ import annotations

import json
import logging
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import DEFAULT_DESCRIPTION_CACHE_SIZE, DESCRIPTION_LINE_BREAK
from .description_cache import DescriptionCache
from .errors import InvalidConfig


class TrackConfig(BaseModel):

    # Description cache
    description_cache_size: int = Field(
        default=DEFAULT_DESCRIPTION_CACHE_SIZE, alias='descriptionCacheSize')

    # Paths
    codon_table_fp: Optional[str] = Field(default=None, alias='codonTableFilePath')
    ref_fasta_fp: Optional[str] = Field(default=None, alias='refFASTAFilePath')

    model_config = ConfigDict(populate_by_name=True)

    @property
    def input_file_paths(self) -> List[str]:
        return [
            fp
            for fp in [self.codon_table_fp, self.ref_fasta_fp]
            if fp is not None
        ]

    def write(self, fp: str) -> None:
        with open(fp, 'w') as fh:
            fh.write(self.model_dump_json(by_alias=True))

    def create_description_cache(self, line_break: str = DESCRIPTION_LINE_BREAK) -> DescriptionCache:
        return DescriptionCache(self.description_cache_size, line_break=line_break)


def load_config(fp: str) -> TrackConfig:
    with open(fp) as fh:
        try:
            config_dict = json.load(fh)
        except json.JSONDecodeError:
            raise InvalidConfig("not a JSON!")

    if not isinstance(config_dict, dict):
        raise InvalidConfig("not a JSON object!")

    try:
        return TrackConfig(**config_dict)
    except ValidationError as ex:
        logging.error(str(ex))
        raise InvalidConfig("invalid field values!")
