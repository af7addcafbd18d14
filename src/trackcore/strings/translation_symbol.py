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

from ..constants import STOP, STOP_LETTER


class TranslationSymbol(str):
    def __init__(self, s: str) -> None:
        if len(s) != 1 and s != STOP:
            raise ValueError(f"Invalid translation symbol: {s}!")
        super().__init__()

    @property
    def is_stop(self) -> bool:
        return self == STOP

    @property
    def letter(self) -> str:
        return STOP_LETTER if self.is_stop else str(self)
