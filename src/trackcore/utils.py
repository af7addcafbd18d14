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

import os
import pathlib
import re

from .constants import DATA_PATH, CODON_TABLE_FN

dna_re = re.compile('^[ACGT]*$')
dna_complement_tr_table = str.maketrans('ACGTN', 'TGCAN')


def is_dna(s: str) -> bool:
    return dna_re.match(s) is not None


def reverse_complement(seq: str) -> str:
    return seq[::-1].translate(dna_complement_tr_table)


def get_data_file_path(fp):
    return os.path.join(pathlib.Path(__file__).parent.absolute(), DATA_PATH, fp)


def get_default_codon_table_path() -> str:
    return get_data_file_path(CODON_TABLE_FN)


def clamp(x: int, lower: int, upper: int) -> int:
    return max(lower, min(x, upper))


def split_whitespace(s: str) -> list[str]:
    """Split a string on runs of whitespace, ignoring leading and trailing whitespace"""

    return s.split()
