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

from enum import Enum


class Strand(str, Enum):
    PLUS = '+'
    MINUS = '-'
    UNKNOWN = '.'

    @classmethod
    def parse(cls, s: str | None) -> Strand:
        match s:
            case '+':
                return cls.PLUS
            case '-':
                return cls.MINUS
            case '.' | '?' | '' | None:
                return cls.UNKNOWN
            case _:
                raise ValueError(f"Invalid strand: {s}!")

    @property
    def is_plus(self) -> bool:
        return self is Strand.PLUS

    @property
    def is_minus(self) -> bool:
        return self is Strand.MINUS
