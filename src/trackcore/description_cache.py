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

from collections import deque
from dataclasses import astuple, dataclass, fields
import logging
from typing import Deque, Iterator, Optional, Sequence

import pandas as pd

from .constants import DESCRIPTION_LINE_BREAK, MIN_DESCRIPTION_CACHE_SIZE
from .utils import split_whitespace


@dataclass(slots=True, frozen=True)
class DescriptionRecord:
    chromosome: str
    position: int
    value: float
    description: str

    def matches(self, chromosome: str, position: int, value: float) -> bool:
        return (
            self.chromosome == chromosome and
            self.position == position and
            self.value == value
        )


class DescriptionCache:
    """
    Bounded first-in-first-out store of the descriptions of point annotations

    Records are keyed by chromosome, position and value; when the cache is
    full, adding a record evicts the oldest one. The header tokens name the
    whitespace-delimited fields of the descriptions.
    """

    __slots__ = {'_max_size', '_records', '_header_tokens', 'line_break'}

    def __init__(self, max_size: int, line_break: str = DESCRIPTION_LINE_BREAK) -> None:
        self._max_size = MIN_DESCRIPTION_CACHE_SIZE
        self._records: Deque[DescriptionRecord] = deque()
        self._header_tokens: list[Optional[str]] = []
        self.line_break = line_break
        self.max_size = max_size

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[DescriptionRecord]:
        return iter(self._records)

    def __contains__(self, key) -> bool:
        return self.get_record(*key) is not None

    @property
    def max_size(self) -> int:
        return self._max_size

    @max_size.setter
    def max_size(self, max_size: int) -> None:
        if max_size < MIN_DESCRIPTION_CACHE_SIZE:
            logging.debug(
                "Description cache size %d raised to the minimum (%d)." %
                (max_size, MIN_DESCRIPTION_CACHE_SIZE))
            max_size = MIN_DESCRIPTION_CACHE_SIZE
        self._max_size = max_size

        # Evict the oldest records in excess
        while len(self._records) > self._max_size:
            self._records.popleft()

    @property
    def header_tokens(self) -> list[Optional[str]]:
        return self._header_tokens

    @header_tokens.setter
    def header_tokens(self, header_tokens: Sequence[Optional[str]]) -> None:
        self._header_tokens = list(header_tokens)

    def set_header_line(self, header: str) -> None:
        self._header_tokens = list(split_whitespace(header))

    def clear(self) -> None:
        self._records.clear()

    def add(self, chromosome: str, position: int, value: float, description: str) -> bool:
        if len(self._records) >= self._max_size:
            self._records.popleft()

        n = len(self._records)
        self._records.append(DescriptionRecord(chromosome, position, value, description))
        return len(self._records) == n + 1

    def get_record(self, chromosome: str, position: int, value: float) -> Optional[DescriptionRecord]:
        for record in self._records:
            if record.matches(chromosome, position, value):
                return record
        return None

    def get_description(self, chromosome: str, position: int, value: float) -> Optional[str]:
        record = self.get_record(chromosome, position, value)
        return record.description if record else None

    def get_description_string(self, chromosome: str, position: int, value: float) -> Optional[str]:
        """
        Get a description as a sequence of header-field pairs

        Header tokens without a corresponding description field are skipped.
        """

        description = self.get_description(chromosome, position, value)
        if description is None:
            return None

        tokens = split_whitespace(description)
        return ''.join(
            f"{header}: {token}{self.line_break}"
            for header, token in zip(self._header_tokens, tokens)
            if header
        )

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            [astuple(record) for record in self._records],
            columns=[f.name for f in fields(DescriptionRecord)])
